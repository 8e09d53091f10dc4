"""Presentation layer - ownership strings and human-friendly formatting."""

from .ownership_formatter import (
    owner_id,
    owner_email,
    co_owner_ids,
    co_owner_emails,
    format_ownership_summary,
)
from .human_formatter import format_human_friendly

__all__ = [
    "owner_id",
    "owner_email",
    "co_owner_ids",
    "co_owner_emails",
    "format_ownership_summary",
    "format_human_friendly",
]

"""Ownership string formatting for UI and notifications."""

from typing import List
from ..contracts.ownership import OwnershipDescription, UNKNOWN_OWNER
from ..contracts.summary import OwnershipSummary
from ..resolvers.base import ResolverFunc
from ..utils.errors import InvalidDescriptionError

DELIMITER = ","


def _require(description: OwnershipDescription) -> OwnershipDescription:
    if description is None:
        raise InvalidDescriptionError("Ownership description is required")
    return description


def _require_resolver(resolver: ResolverFunc) -> ResolverFunc:
    if resolver is None:
        raise InvalidDescriptionError("Email resolver is required")
    return resolver


def owner_id(description: OwnershipDescription) -> str:
    """
    Get id of the primary owner.

    Args:
        description: Ownership description

    Returns:
        User id of the primary owner, "unknown" if the owner is not specified
    """
    return _require(description).primary_owner_id or UNKNOWN_OWNER


def owner_email(description: OwnershipDescription, resolver: ResolverFunc) -> str:
    """
    Get email of the primary owner.

    Args:
        description: Ownership description
        resolver: Maps a user id to an email, or None

    Returns:
        Owner's email, or empty string if it is not available
    """
    _require(description)
    email = _require_resolver(resolver)(owner_id(description))
    return email if email is not None else ""


def co_owner_ids(description: OwnershipDescription) -> str:
    """
    Get a comma-separated list of owner ids.

    The primary owner comes first, followed by co-owners in declared order.
    Duplicates are kept.
    """
    ids = [owner_id(description)]
    ids.extend(description.co_owner_ids)
    return DELIMITER.join(ids)


def co_owner_emails(description: OwnershipDescription, resolver: ResolverFunc) -> str:
    """
    Get a comma-separated list of owner emails (may be empty).

    The primary owner's email comes first if available. Co-owners without an
    email are skipped.
    """
    emails: List[str] = []
    primary = owner_email(description, resolver)
    if primary:
        emails.append(primary)

    for user_id in description.co_owner_ids:
        email = resolver(user_id)
        if email:
            emails.append(email)

    return DELIMITER.join(emails)


def format_ownership_summary(description: OwnershipDescription, resolver: ResolverFunc) -> OwnershipSummary:
    """Format all ownership strings of a description into one summary."""
    _require(description)
    return OwnershipSummary(
        ownership_enabled=description.ownership_enabled,
        owner_id=owner_id(description),
        owner_email=owner_email(description, resolver),
        co_owner_ids=co_owner_ids(description),
        co_owner_emails=co_owner_emails(description, resolver)
    )

from .ownership import OwnershipDescription, UNKNOWN_OWNER, DISABLED_DESCRIPTION
from .summary import OwnershipSummary

__all__ = [
    "OwnershipDescription",
    "UNKNOWN_OWNER",
    "DISABLED_DESCRIPTION",
    "OwnershipSummary",
]

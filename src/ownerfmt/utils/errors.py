"""Custom exception classes for ownerfmt."""


class OwnerFmtError(Exception):
    """Base exception for all ownerfmt errors."""
    pass


class InvalidDescriptionError(OwnerFmtError, ValueError):
    """Raised when a required ownership description or resolver is missing."""
    pass


class DescriptionLoadError(OwnerFmtError):
    """Raised when an ownership description file cannot be loaded or is invalid."""
    pass


class ConfigError(OwnerFmtError):
    """Raised when configuration is invalid or missing."""
    pass

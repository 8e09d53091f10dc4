"""Email directory backed by configuration."""

from typing import Any, Dict, Mapping, Optional
from ..contracts.ownership import UNKNOWN_OWNER
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .base import EmailResolver

logger = get_logger("resolvers.directory")


class DirectoryEmailResolver(EmailResolver):
    """Resolve emails from an explicit user map, then from a default mail domain."""
    
    def __init__(self, users: Optional[Mapping[str, str]] = None, default_domain: Optional[str] = None):
        """
        Initialize the directory.
        
        Args:
            users: Mapping of user id to email address
            default_domain: Mail domain appended to ids without an explicit entry
        """
        self.users = dict(users or {})
        self.default_domain = default_domain or None
    
    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "DirectoryEmailResolver":
        """
        Build a resolver from the 'users' and 'email' config sections.
        
        Raises:
            ConfigError: If a section has the wrong shape
        """
        users = config.get("users") or {}
        if not isinstance(users, dict):
            raise ConfigError("'users' section must be a mapping of user id to email")
        
        email_config = config.get("email") or {}
        if not isinstance(email_config, dict):
            raise ConfigError("'email' section must be a mapping")
        
        return cls(
            users={str(k): str(v) for k, v in users.items() if v},
            default_domain=email_config.get("default_domain")
        )
    
    def resolve(self, user_id: str) -> Optional[str]:
        if not user_id or user_id == UNKNOWN_OWNER:
            return None
        
        email = self.users.get(user_id)
        if email:
            return email
        
        if self.default_domain:
            return f"{user_id}@{self.default_domain}"
        
        logger.debug(f"No email available for user '{user_id}'")
        return None
    
    def __repr__(self) -> str:
        return f"DirectoryEmailResolver(users={len(self.users)}, default_domain={self.default_domain})"

"""Abstract base class for email resolvers."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

ResolverFunc = Callable[[str], Optional[str]]


class EmailResolver(ABC):
    """
    Abstract interface for email resolvers.
    
    A resolver maps a user id to an email address. The formatter treats it as
    a plain callable, so any function with the same signature is accepted in
    place of a subclass.
    
    Resolvers must:
    - Return None when no email is known (never raise for unknown users)
    - Not depend on call order or call count
    """
    
    @abstractmethod
    def resolve(self, user_id: str) -> Optional[str]:
        """
        Resolve a user id to an email address.
        
        Args:
            user_id: Opaque user identifier
            
        Returns:
            Email string, or None if not available
        """
        pass
    
    def __call__(self, user_id: str) -> Optional[str]:
        return self.resolve(user_id)

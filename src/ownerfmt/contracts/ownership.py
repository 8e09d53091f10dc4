"""Pydantic model for ownership descriptions (input record)."""

from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator

UNKNOWN_OWNER = "unknown"


class OwnershipDescription(BaseModel):
    """Primary owner plus ordered co-owners of a host-defined entity."""
    ownership_enabled: bool = Field(default=True, alias="ownershipEnabled", description="Whether ownership is enabled for the entity")
    primary_owner_id: str = Field(default=UNKNOWN_OWNER, alias="primaryOwnerId", description="User id of the primary owner, 'unknown' if not specified")
    co_owner_ids: Tuple[str, ...] = Field(default_factory=tuple, alias="coOwnerIds", description="Co-owner user ids in declared order")
    
    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "ownershipEnabled": True,
                "primaryOwnerId": "alice",
                "coOwnerIds": ["bob", "carol"]
            }
        }
    
    @field_validator("primary_owner_id", mode="before")
    @classmethod
    def _unspecified_to_sentinel(cls, value):
        if value is None or value == "":
            return UNKNOWN_OWNER
        return value
    
    @field_validator("co_owner_ids", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return () if value is None else value
    
    def has_primary_owner(self) -> bool:
        """True if a primary owner is specified."""
        return self.primary_owner_id != UNKNOWN_OWNER
    
    def is_primary_owner(self, user_id: Optional[str]) -> bool:
        """Check if the user is the primary owner."""
        if user_id is None:
            return False
        return self.has_primary_owner() and self.primary_owner_id == user_id
    
    def is_owner(self, user_id: Optional[str], accept_co_owners: bool = True) -> bool:
        """
        Check if the user is an owner of the entity.
        
        Args:
            user_id: User id to check
            accept_co_owners: Also accept users listed as co-owners
            
        Returns:
            True if the user is the primary owner (or a co-owner, if accepted)
        """
        if user_id is None:
            return False
        if self.is_primary_owner(user_id):
            return True
        return accept_co_owners and user_id in self.co_owner_ids


DISABLED_DESCRIPTION = OwnershipDescription(ownership_enabled=False)

"""Pydantic model for formatted ownership output."""

from pydantic import BaseModel, Field


class OwnershipSummary(BaseModel):
    """Formatted ownership strings, ready for UI and notifications."""
    ownership_enabled: bool = Field(default=True, description="Whether ownership is enabled for the entity")
    owner_id: str = Field(..., description="Primary owner id, 'unknown' if not specified")
    owner_email: str = Field(default="", description="Primary owner email, empty if not available")
    co_owner_ids: str = Field(..., description="Comma-separated owner ids, primary first")
    co_owner_emails: str = Field(default="", description="Comma-separated available owner emails, primary first")
    
    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "ownership_enabled": True,
                "owner_id": "alice",
                "owner_email": "a@x",
                "co_owner_ids": "alice,bob,carol",
                "co_owner_emails": "a@x,c@x"
            }
        }

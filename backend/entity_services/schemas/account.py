"""
Account Pydantic schema describing stored account records.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class AccountSchema(BaseModel):
    """Shape of an account record. An account belongs to one person."""
    model_config = ConfigDict(title="account", extra="allow")

    id: Optional[str] = None
    person: str = Field(..., min_length=1)
    provider: str = Field(..., min_length=1, max_length=50)
    user_id: str = Field(..., min_length=1, max_length=255)
    created: Optional[int] = Field(None, ge=0)
    modified: Optional[int] = Field(None, ge=0)

"""
Organization Pydantic schema describing stored organization records.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class OrganizationSchema(BaseModel):
    """Shape of an organization record."""
    model_config = ConfigDict(title="organization", extra="allow")

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    url: Optional[str] = Field(None, max_length=2048)
    members: List[str] = Field(default_factory=list)
    created: Optional[int] = Field(None, ge=0)
    modified: Optional[int] = Field(None, ge=0)

"""
Person Pydantic schema describing stored person records.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class PersonSchema(BaseModel):
    """Shape of a person record."""
    model_config = ConfigDict(title="person", extra="allow")

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    info: Optional[str] = None
    organizations: List[str] = Field(default_factory=list)
    created: Optional[int] = Field(None, ge=0)
    modified: Optional[int] = Field(None, ge=0)

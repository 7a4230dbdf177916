"""
Pydantic schemas for Playlist endpoints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaylistCreate(BaseModel):
    """Schema for creating a playlist."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Playlist display name",
    )
    description: Optional[str] = Field(default=None, max_length=2000)
    is_public: bool = Field(default=False, alias="isPublic")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Playlist name cannot be empty")
        return v


class PlaylistResponse(BaseModel):
    """A playlist as returned to its owner."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    songs: List[str] = Field(default_factory=list)
    is_public: bool = Field(alias="isPublic")
    created_at: datetime = Field(alias="createdAt")

"""
Pydantic schemas for the liked-songs endpoints.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SongRequest(BaseModel):
    """Body of like/unlike requests."""

    model_config = ConfigDict(populate_by_name=True)

    song_id: str = Field(..., min_length=1, max_length=512, alias="songId")


class SongActionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    song_id: str = Field(alias="songId")


class LikedSongsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    liked_songs: List[str] = Field(default_factory=list, alias="likedSongs")

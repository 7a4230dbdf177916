"""
Pydantic schemas for VibeTune API.
"""

from .playlist import PlaylistCreate, PlaylistResponse
from .song import LikedSongsResponse, SongActionResponse, SongRequest
from .user import (
    AuthResponse,
    Preferences,
    PreferencesUpdate,
    ProfileUpdate,
    UserLoginRequest,
    UserProfile,
    UserRegisterRequest,
    UserSummary,
)

__all__ = [
    # Playlist
    "PlaylistCreate",
    "PlaylistResponse",
    # Songs
    "LikedSongsResponse",
    "SongActionResponse",
    "SongRequest",
    # User
    "AuthResponse",
    "Preferences",
    "PreferencesUpdate",
    "ProfileUpdate",
    "UserLoginRequest",
    "UserProfile",
    "UserRegisterRequest",
    "UserSummary",
]

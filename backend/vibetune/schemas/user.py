"""
Pydantic schemas for authentication and profile endpoints.

Wire names are camelCase (``isAdmin``, ``profilePicture``); Python names
stay snake_case through field aliases.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from vibetune.models.user import User

from .playlist import PlaylistResponse


def strip_text(value):
    if isinstance(value, str):
        return value.strip()
    return value


def normalize_username(value: str) -> str:
    value = value.strip()
    if len(value) < 3:
        raise ValueError("Username must be at least 3 characters")
    return value


# --- Request Schemas ---


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(
        ...,
        min_length=3,
        max_length=50,
        description="Unique username (3-50 characters)",
    )
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=128,
        description="Password (6-128 characters)",
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return normalize_username(v)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return strip_text(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class UserLoginRequest(BaseModel):
    """Request schema for user login."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.strip().lower()


class PreferencesUpdate(BaseModel):
    """Partial preferences update; omitted keys keep their stored value."""

    model_config = ConfigDict(extra="forbid")

    theme: Optional[str] = Field(default=None, max_length=20)
    language: Optional[str] = Field(default=None, max_length=10)
    autoplay: Optional[bool] = None


class ProfileUpdate(BaseModel):
    """
    Partial profile update.

    Only these four properties may change through the profile endpoint;
    any other key fails validation and nothing is applied.
    """

    model_config = ConfigDict(extra="forbid")

    username: Optional[str] = Field(default=None, max_length=50)
    email: Optional[EmailStr] = None
    profile_picture: Optional[str] = Field(
        default=None, alias="profilePicture", max_length=512
    )
    preferences: Optional[PreferencesUpdate] = None

    @field_validator("username", "email", "profile_picture", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return normalize_username(v)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return strip_text(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


# --- Response Schemas ---


class Preferences(BaseModel):
    theme: str = "dark"
    language: str = "en"
    autoplay: bool = True


class UserSummary(BaseModel):
    """User info included in register/login responses."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    username: str
    email: str
    profile_picture: str = Field(alias="profilePicture")
    is_admin: bool = Field(alias="isAdmin")


class UserProfile(UserSummary):
    """Full public-safe projection of a user. Never carries the password hash."""

    preferences: Preferences
    favorite_songs: List[str] = Field(default_factory=list, alias="favoriteSongs")
    playlists: List[PlaylistResponse] = Field(default_factory=list)
    created_at: datetime = Field(alias="createdAt")
    last_login: datetime = Field(alias="lastLogin")

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            profile_picture=user.profile_picture,
            is_admin=user.is_admin,
            preferences=Preferences(**(user.preferences or {})),
            favorite_songs=[fav.song_id for fav in user.favorite_songs],
            playlists=[PlaylistResponse.model_validate(p) for p in user.playlists],
            created_at=user.created_at,
            last_login=user.last_login,
        )


class AuthResponse(BaseModel):
    """Response schema for successful registration or login."""

    user: UserSummary
    token: str

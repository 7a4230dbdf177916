"""
User model for VibeTune.

Stores account credentials, profile settings and owns the user's favorites
and playlists.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List
import uuid

from sqlalchemy import Boolean, DateTime, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vibetune.core.database import Base

if TYPE_CHECKING:
    from .favorite import FavoriteSong
    from .playlist import Playlist


DEFAULT_PROFILE_PICTURE = "img/default-avatar.png"


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def default_preferences() -> Dict[str, Any]:
    return {"theme": "dark", "language": "en", "autoplay": True}


class User(Base):
    """User model representing registered listeners."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid,
        doc="UUID primary key"
    )
    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        doc="Unique username"
    )
    email: Mapped[str] = mapped_column(
        String(254),
        unique=True,
        nullable=False,
        index=True,
        doc="Unique email address, stored lower-cased"
    )
    password_hash: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        doc="Hashed password (bcrypt)"
    )
    is_admin: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        doc="Grants access to the admin endpoints"
    )
    profile_picture: Mapped[str] = mapped_column(
        String(512),
        default=DEFAULT_PROFILE_PICTURE,
        nullable=False,
        doc="Avatar path or URL"
    )
    preferences: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        default=default_preferences,
        nullable=False,
        doc="Display and playback options"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        doc="Account creation timestamp"
    )
    last_login: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        doc="Last successful login"
    )

    # Relationships
    favorite_songs: Mapped[List["FavoriteSong"]] = relationship(
        "FavoriteSong",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="FavoriteSong.id",
        lazy="selectin",
    )
    playlists: Mapped[List["Playlist"]] = relationship(
        "Playlist",
        back_populates="owner",
        cascade="all, delete-orphan",
        order_by="Playlist.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, username={self.username!r})>"

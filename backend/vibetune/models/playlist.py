"""
Playlist model for VibeTune.

Playlists belong to exactly one user and are kept in creation order through
``position``.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vibetune.core.database import Base

from .user import generate_uuid, utcnow

if TYPE_CHECKING:
    from .user import User


class Playlist(Base):
    """A named, ordered list of song identifiers owned by one user."""

    __tablename__ = "playlists"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_uuid,
        doc="UUID primary key"
    )
    owner_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Foreign key to owning user"
    )
    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Index within the owner's playlist sequence"
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        doc="Playlist display name"
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Optional playlist description"
    )
    songs: Mapped[List[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
        doc="Ordered song identifiers"
    )
    is_public: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    owner: Mapped["User"] = relationship("User", back_populates="playlists")

    def __repr__(self) -> str:
        return f"<Playlist(id={self.id!r}, name={self.name!r}, owner_id={self.owner_id!r})>"

"""
Favorite song model for VibeTune.

One row per (user, song) pair. The unique constraint is what keeps a song
from appearing twice in a user's favorites.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vibetune.core.database import Base

from .user import utcnow

if TYPE_CHECKING:
    from .user import User


class FavoriteSong(Base):
    """A song a user has liked."""

    __tablename__ = "favorite_songs"
    __table_args__ = (
        UniqueConstraint("user_id", "song_id", name="uq_favorite_songs_user_song"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Foreign key to the liking user"
    )
    song_id: Mapped[str] = mapped_column(
        String(512),
        nullable=False,
        doc="Opaque song identifier"
    )
    liked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    user: Mapped["User"] = relationship("User", back_populates="favorite_songs")

    def __repr__(self) -> str:
        return f"<FavoriteSong(user_id={self.user_id!r}, song_id={self.song_id!r})>"

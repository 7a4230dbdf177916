"""
Liked-songs operations.

Adds and removes are single statements against the ``favorite_songs``
table; the (user_id, song_id) unique constraint keeps two concurrent likes
of the same song from both landing.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.core.errors import Conflict
from vibetune.models.favorite import FavoriteSong
from vibetune.models.user import User

logger = logging.getLogger(__name__)


async def like_song(db: AsyncSession, user: User, song_id: str) -> None:
    """
    Add a song to the user's favorites.

    Raises:
        Conflict: If the song is already a favorite
    """
    result = await db.execute(
        select(FavoriteSong.id).where(
            FavoriteSong.user_id == user.id,
            FavoriteSong.song_id == song_id,
        )
    )
    if result.scalar_one_or_none() is not None:
        raise Conflict("Song already in favorites")

    db.add(FavoriteSong(user_id=user.id, song_id=song_id))
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise Conflict("Song already in favorites")

    logger.info("User %s liked %s", user.id, song_id)


async def unlike_song(db: AsyncSession, user: User, song_id: str) -> bool:
    """
    Remove a song from the user's favorites.

    Returns True if a row was removed; removing a song that is not a
    favorite is not an error.
    """
    result = await db.execute(
        delete(FavoriteSong).where(
            FavoriteSong.user_id == user.id,
            FavoriteSong.song_id == song_id,
        )
    )
    removed = (result.rowcount or 0) > 0
    if removed:
        logger.info("User %s unliked %s", user.id, song_id)
    return removed


async def list_liked_songs(db: AsyncSession, user: User) -> List[str]:
    """The user's liked song ids in the order they were liked."""
    result = await db.execute(
        select(FavoriteSong.song_id)
        .where(FavoriteSong.user_id == user.id)
        .order_by(FavoriteSong.id)
    )
    return list(result.scalars().all())

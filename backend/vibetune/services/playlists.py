"""
Playlist operations scoped to the owning user.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.models.playlist import Playlist
from vibetune.models.user import User
from vibetune.schemas.playlist import PlaylistCreate

logger = logging.getLogger(__name__)


async def create_playlist(db: AsyncSession, user: User, data: PlaylistCreate) -> Playlist:
    """Append a new, empty playlist to the user's playlist sequence."""
    result = await db.execute(
        select(func.count(Playlist.id)).where(Playlist.owner_id == user.id)
    )
    position = result.scalar() or 0

    playlist = Playlist(
        owner_id=user.id,
        position=position,
        name=data.name,
        description=data.description,
        songs=[],
        is_public=data.is_public,
    )
    db.add(playlist)
    await db.flush()
    await db.refresh(playlist)

    logger.info("Playlist created: %s for user %s", playlist.id, user.id)
    return playlist

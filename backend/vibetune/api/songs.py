"""
Liked-songs endpoints for VibeTune.

All three act on the authenticated user's favorites only.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.api.deps import get_current_active_user, get_db
from vibetune.models.user import User
from vibetune.schemas.song import LikedSongsResponse, SongActionResponse, SongRequest
from vibetune.services import favorites as favorite_service

router = APIRouter()


@router.post("/like", response_model=SongActionResponse)
async def like_song(
    data: SongRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> SongActionResponse:
    """
    Add a song to favorites.

    Raises:
        Conflict (400): If the song is already a favorite
    """
    await favorite_service.like_song(db, current_user, data.song_id)
    return SongActionResponse(message="Song added to favorites", song_id=data.song_id)


@router.delete("/unlike", response_model=SongActionResponse)
async def unlike_song(
    data: SongRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> SongActionResponse:
    """Remove a song from favorites; succeeds even if it was not liked."""
    await favorite_service.unlike_song(db, current_user, data.song_id)
    return SongActionResponse(message="Song removed from favorites", song_id=data.song_id)


@router.get("/liked", response_model=LikedSongsResponse)
async def get_liked_songs(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> LikedSongsResponse:
    liked = await favorite_service.list_liked_songs(db, current_user)
    return LikedSongsResponse(liked_songs=liked)

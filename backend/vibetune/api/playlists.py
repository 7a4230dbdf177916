"""
Playlist endpoints for VibeTune.

Playlists can only be created for the authenticated user. Editing and
deleting playlists is not offered.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.api.deps import get_current_active_user, get_db
from vibetune.models.user import User
from vibetune.schemas.playlist import PlaylistCreate, PlaylistResponse
from vibetune.services import playlists as playlist_service

router = APIRouter()


@router.post(
    "",
    response_model=PlaylistResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create playlist",
    description="Append a new empty playlist to the current user's playlists.",
)
async def create_playlist(
    data: PlaylistCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> PlaylistResponse:
    playlist = await playlist_service.create_playlist(db, current_user, data)
    return PlaylistResponse.model_validate(playlist)

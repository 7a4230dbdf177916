"""
VibeTune API routes package.

Contains all API endpoint routers for the application.
"""

from fastapi import APIRouter

from .admin import router as admin_router
from .auth import router as auth_router
from .library import router as library_router
from .playlists import router as playlists_router
from .songs import router as songs_router
from .user import router as user_router

# Main API router that includes all sub-routers, mounted under /api
api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(user_router, prefix="/user", tags=["user"])
api_router.include_router(playlists_router, prefix="/playlists", tags=["playlists"])
api_router.include_router(admin_router, prefix="/admin", tags=["admin"])
api_router.include_router(songs_router, prefix="/songs", tags=["songs"])

__all__ = [
    "api_router",
    "admin_router",
    "auth_router",
    "library_router",
    "playlists_router",
    "songs_router",
    "user_router",
]

"""
Service layer for VibeTune.

Business logic shared by the HTTP endpoints and the admin CLI.
"""

from . import favorites, playlists, users

__all__ = [
    "favorites",
    "playlists",
    "users",
]

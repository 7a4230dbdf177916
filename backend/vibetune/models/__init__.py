"""
SQLAlchemy models for VibeTune.

This module exports all database models for convenient importing:

    from vibetune.models import User, FavoriteSong, Playlist

Users and playlists use UUID strings as primary keys for SQLite compatibility.
"""

from .user import User
from .favorite import FavoriteSong
from .playlist import Playlist

__all__ = [
    "User",
    "FavoriteSong",
    "Playlist",
]

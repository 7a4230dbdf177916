"""
Common dependencies for VibeTune API endpoints.

Provides reusable FastAPI dependencies for database sessions,
settings, authentication and admin checks.
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.core.config import Settings
from vibetune.core.database import get_async_session
from vibetune.core.errors import Forbidden
from vibetune.core.security import get_current_user
from vibetune.models.user import User

logger = logging.getLogger(__name__)


async def get_db(
    session: AsyncSession = Depends(get_async_session),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    The session is committed on success or rolled back on exception.

    Usage:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    yield session


def get_app_settings(request: Request) -> Settings:
    """The settings object the application was built with."""
    return request.app.state.settings


async def get_current_active_user(
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Get the current authenticated user.

    Usage:
        @router.get("/profile")
        async def get_profile(user: User = Depends(get_current_active_user)):
            return {"username": user.username}

    Raises:
        Unauthenticated: If token is missing, invalid, or user not found
    """
    return current_user


async def require_admin(
    current_user: User = Depends(get_current_active_user),
) -> User:
    """
    Require an authenticated admin.

    Raises:
        Forbidden: If the user is not an admin
    """
    if not current_user.is_admin:
        logger.warning("Admin access denied for user %s", current_user.id)
        raise Forbidden("Access denied. Admin privileges required.")
    return current_user


__all__ = [
    "get_db",
    "get_app_settings",
    "get_current_active_user",
    "get_current_user",
    "require_admin",
]

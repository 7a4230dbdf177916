"""
Admin endpoints for VibeTune. Read-only.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.api.deps import get_db, require_admin
from vibetune.models.user import User
from vibetune.schemas.user import UserProfile
from vibetune.services import users as user_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/users", response_model=List[UserProfile])
async def list_users(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
) -> List[UserProfile]:
    """
    List every user, password hashes excluded.

    Raises:
        Forbidden (403): If the caller is not an admin
    """
    users = await user_service.list_users(db)
    logger.info("Admin %s listed %d users", admin.id, len(users))
    return [UserProfile.from_user(user) for user in users]

"""
Profile endpoints. Both operate on the token subject only.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.api.deps import get_current_active_user, get_db
from vibetune.models.user import User
from vibetune.schemas.user import ProfileUpdate, UserProfile
from vibetune.services import users as user_service

router = APIRouter()


@router.get("/profile", response_model=UserProfile)
async def get_profile(
    current_user: User = Depends(get_current_active_user),
) -> UserProfile:
    """Current user's profile without the password hash."""
    return UserProfile.from_user(current_user)


@router.patch("/profile", response_model=UserProfile)
async def update_profile(
    data: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UserProfile:
    """
    Update username, email, profile picture and/or preferences.

    Unknown fields fail request validation, so a request is applied whole or
    not at all.
    """
    user = await user_service.update_profile(db, current_user, data)
    return UserProfile.from_user(user)

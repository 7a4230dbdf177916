"""
Authentication endpoints for VibeTune.

Provides user registration and login returning bearer tokens.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.api.deps import get_app_settings, get_db
from vibetune.core.config import Settings
from vibetune.core.security import create_access_token
from vibetune.schemas.user import (
    AuthResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserSummary,
)
from vibetune.services import users as user_service

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    data: UserRegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """
    Register a new user.

    Creates the account with a hashed password and returns a token so the
    client is signed in straight away.

    Raises:
        Conflict (400): If the username or email already exists
    """
    user = await user_service.register_user(db, data)
    token = create_access_token(user_id=user.id, settings=settings)

    return AuthResponse(user=UserSummary.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: UserLoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """
    Login with email and password.

    Raises:
        InvalidCredentials (400): Same error for unknown email and bad password
    """
    user = await user_service.authenticate_user(db, data.email, data.password)
    token = create_access_token(user_id=user.id, settings=settings)

    return AuthResponse(user=UserSummary.model_validate(user), token=token)

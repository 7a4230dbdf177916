"""
Security utilities for VibeTune.

Provides password hashing with bcrypt, JWT token management and the
dependency that resolves a bearer token to its user.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.models.user import User

from .config import Settings
from .database import get_async_session
from .errors import Unauthenticated

logger = logging.getLogger(__name__)

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"

# HTTP Bearer token scheme; missing headers are reported by get_current_user
security = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Every call draws a fresh salt, so hashing the same password twice gives
    two different strings.

    Args:
        password: Plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password to compare against

    Returns:
        True if password matches, False otherwise (including unreadable hashes)
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: str,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a JWT access token.

    The token carries no ``exp`` claim unless ``expires_delta`` is given or
    ``settings.access_token_expire_hours`` is set.

    Args:
        user_id: User ID to encode in the token
        settings: Application settings holding the signing secret
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None and settings.access_token_expire_hours:
        expires_delta = timedelta(hours=settings.access_token_expire_hours)

    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": user_id,
        "iat": now,
    }
    if expires_delta is not None:
        to_encode["exp"] = now + expires_delta
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def decode_token(token: str, settings: Settings) -> dict:
    """
    Decode and validate a JWT token.

    Args:
        token: JWT token string to decode
        settings: Application settings holding the signing secret

    Returns:
        Decoded token payload

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_async_session),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Extracts and validates the JWT token from the Authorization header,
    then retrieves the corresponding user from the database. The raw token
    is kept on ``request.state.token`` for downstream handlers.

    Raises:
        Unauthenticated: If the header is missing, the token is invalid,
            or the user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Please authenticate")

    settings: Settings = request.app.state.settings
    token = credentials.credentials

    try:
        payload = decode_token(token, settings)
    except JWTError as e:
        logger.warning("Token verification failed: %s", e)
        raise Unauthenticated("Invalid or expired token")

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise Unauthenticated("Invalid or expired token")

    user = await db.get(User, user_id)
    if user is None:
        logger.warning("Token subject %s no longer exists", user_id)
        raise Unauthenticated("Invalid or expired token")

    request.state.token = token
    return user

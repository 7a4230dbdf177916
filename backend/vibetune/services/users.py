"""
Account operations: registration, login, profile updates and admin queries.

Every function takes the session it works in; committing is left to the
caller (the request-scoped session commits when the handler returns).
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vibetune.core.errors import Conflict, InvalidCredentials
from vibetune.core.security import hash_password, verify_password
from vibetune.models.user import User, default_preferences
from vibetune.schemas.user import ProfileUpdate, UserRegisterRequest

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Get user by email (case-insensitive)."""
    result = await db.execute(select(User).where(User.email == email.strip().lower()))
    return result.scalar_one_or_none()


async def _find_conflicting_user(
    db: AsyncSession,
    username: Optional[str] = None,
    email: Optional[str] = None,
    exclude_id: Optional[str] = None,
) -> Optional[User]:
    clauses = []
    if username is not None:
        clauses.append(User.username == username)
    if email is not None:
        clauses.append(User.email == email)
    if not clauses:
        return None

    query = select(User).where(or_(*clauses))
    if exclude_id is not None:
        query = query.where(User.id != exclude_id)
    result = await db.execute(query.limit(1))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, data: UserRegisterRequest) -> User:
    """
    Create a new account.

    Raises:
        Conflict: If the username or email is already taken
    """
    existing = await _find_conflicting_user(db, username=data.username, email=data.email)
    if existing is not None:
        raise Conflict("User already exists")

    password_hash = await run_in_threadpool(hash_password, data.password)
    user = User(
        username=data.username,
        email=data.email,
        password_hash=password_hash,
        is_admin=False,
        preferences=default_preferences(),
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same name/email
        await db.rollback()
        raise Conflict("User already exists")
    await db.refresh(user)

    logger.info("User registered: %s (%s)", user.id, user.username)
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    """
    Check credentials and record the login time.

    Unknown email and wrong password raise the same error.

    Raises:
        InvalidCredentials: If the credentials do not match an account
    """
    user = await get_user_by_email(db, email)
    if user is None:
        logger.info("Login failed: unknown email")
        raise InvalidCredentials()

    if not await run_in_threadpool(verify_password, password, user.password_hash):
        logger.info("Login failed: bad password for user %s", user.id)
        raise InvalidCredentials()

    user.last_login = datetime.now(timezone.utc)
    await db.flush()
    logger.info("User logged in: %s", user.id)
    return user


async def update_profile(db: AsyncSession, user: User, data: ProfileUpdate) -> User:
    """
    Apply a validated partial update to the user's own profile.

    Raises:
        Conflict: If the new username or email belongs to another user
    """
    update_data = data.model_dump(exclude_unset=True)

    if "username" in update_data or "email" in update_data:
        existing = await _find_conflicting_user(
            db,
            username=update_data.get("username"),
            email=update_data.get("email"),
            exclude_id=user.id,
        )
        if existing is not None:
            raise Conflict("Username or email already in use")

    preferences = update_data.pop("preferences", None)
    for field, value in update_data.items():
        setattr(user, field, value)

    if preferences:
        merged = dict(user.preferences or default_preferences())
        merged.update({k: v for k, v in preferences.items() if v is not None})
        user.preferences = merged

    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise Conflict("Username or email already in use")
    await db.refresh(user)

    logger.info("Profile updated for user %s: %s", user.id, sorted(data.model_fields_set))
    return user


async def list_users(db: AsyncSession) -> List[User]:
    """All users, oldest first."""
    result = await db.execute(select(User).order_by(User.created_at, User.username))
    return list(result.scalars().all())


async def set_admin(db: AsyncSession, email: str, is_admin: bool = True) -> Optional[User]:
    """Grant or revoke admin rights by email; returns None if no such user."""
    user = await get_user_by_email(db, email)
    if user is None:
        return None
    user.is_admin = is_admin
    await db.flush()
    logger.info("Admin flag for user %s set to %s", user.id, is_admin)
    return user

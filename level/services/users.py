"""
User service: signup, lookup and credential checks.
"""

from __future__ import annotations

import uuid

import sqlalchemy as sa
import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from level.core.auth import hash_password, verify_password
from level.core.errors import AuthenticationFailed, NotFound, ValidationFailed
from level.models.user import User
from level_shared.schemas.common import UserState
from level_shared.schemas.users import UserCreateRequest

log = structlog.get_logger()


async def get_user(user_id: uuid.UUID, session: AsyncSession) -> User:
    """Get a user by id; raises NotFound."""
    user = await session.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return user


async def get_user_by_email(email: str, session: AsyncSession) -> User:
    """Case-insensitive lookup by email; raises NotFound."""
    result = await session.execute(
        select(User).where(sa.func.lower(User.email) == sa.func.lower(email))
    )
    user = result.scalar_one_or_none()
    if not user:
        raise NotFound("User not found")
    return user


async def create_user(req: UserCreateRequest, session: AsyncSession) -> User:
    """Sign up a new user. Emails are unique regardless of case."""
    try:
        await get_user_by_email(req.email, session)
    except NotFound:
        pass
    else:
        raise ValidationFailed("user", {"email": ["has already been taken"]})

    user = User(
        email=req.email,
        first_name=req.first_name,
        last_name=req.last_name,
        time_zone=req.time_zone,
        password_hash=hash_password(req.password),
        state=UserState.ACTIVE.value,
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        if "users_lower_email_index" in str(exc.orig):
            raise ValidationFailed("user", {"email": ["has already been taken"]}) from exc
        raise

    log.info("user.created", user_id=str(user.id))
    return user


async def authenticate(email: str, password: str, session: AsyncSession) -> User:
    """Check email/password credentials; raises AuthenticationFailed."""
    try:
        user = await get_user_by_email(email, session)
    except NotFound:
        raise AuthenticationFailed("Invalid email or password")

    if (
        user.state != UserState.ACTIVE.value
        or not user.password_hash
        or not verify_password(password, user.password_hash)
    ):
        log.info("user.authentication_failed", user_id=str(user.id))
        raise AuthenticationFailed("Invalid email or password")
    return user

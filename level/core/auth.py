"""
Authentication and Authorization for Level.

Supports:
- Password hashing (bcrypt) for email/password login
- Bearer user tokens (signed JWT, ``sub`` = user id)
- Space-scoping: resolves the requester's SpaceUser for ``/spaces/{spaceSlug}``
- Role-based authorization dependencies
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
import structlog
from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from level.core.config import get_settings
from level.core.database import get_session
from level.core.errors import AuthenticationFailed, PermissionDenied
from level.models.space import Space
from level.models.space_user import SpaceUser
from level.models.user import User
from level.services import spaces as space_service
from level_shared.schemas.common import SPACE_MANAGER_ROLES, SpaceUserRole, UserState

log = structlog.get_logger()
settings = get_settings()

authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

TOKEN_TYPE = "user"

# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

def hash_password(password: str) -> str:
    """bcrypt hash of ``password`` at the configured cost."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Whether ``password`` matches; a malformed hash never matches."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
    except ValueError:
        return False


# ---------------------------------------------------------------------------
# User tokens
# ---------------------------------------------------------------------------

def create_jwt(
    user_id: uuid.UUID,
    *,
    expires_delta: Optional[timedelta] = None,
) -> tuple[str, datetime]:
    """Sign a bearer token for ``user_id``. Returns (token, expires_at)."""
    issued_at = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)
    expires_at = issued_at + expires_delta
    claims = {
        "sub": str(user_id),
        "typ": TOKEN_TYPE,
        "iat": issued_at,
        "exp": expires_at,
        "jti": uuid.uuid4().hex,
    }
    token = jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)
    return token, expires_at


def decode_jwt(token: str) -> dict:
    """Verify signature, expiry and required claims. Raises jwt.PyJWTError."""
    claims = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )
    if claims.get("typ") != TOKEN_TYPE:
        raise jwt.InvalidTokenError("Not a user token")
    return claims


# ---------------------------------------------------------------------------
# Request context
# ---------------------------------------------------------------------------

class AuthenticatedSpaceUser:
    """The requester resolved within one space."""

    def __init__(self, user: User, space: Space, space_user: SpaceUser):
        self.user = user
        self.space = space
        self.space_user = space_user

    @property
    def user_id(self) -> uuid.UUID:
        return self.user.id

    @property
    def space_id(self) -> uuid.UUID:
        return self.space.id

    @property
    def role(self) -> SpaceUserRole:
        return SpaceUserRole(self.space_user.role)


async def get_current_user(
    authorization: Optional[str] = Depends(authorization_header),
    session: AsyncSession = Depends(get_session),
) -> User:
    """Resolve the user behind a ``Bearer <token>`` header."""
    scheme, _, credentials = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not credentials.strip():
        raise AuthenticationFailed()

    try:
        claims = decode_jwt(credentials.strip())
        user_id = uuid.UUID(claims["sub"])
    except (jwt.PyJWTError, ValueError):
        raise AuthenticationFailed("Invalid or expired token")

    user = await session.get(User, user_id)
    if user is None or user.state != UserState.ACTIVE.value:
        raise AuthenticationFailed("Invalid or expired token")
    return user


async def get_space_context(
    spaceSlug: str,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> AuthenticatedSpaceUser:
    """Main space-scoping dependency; non-members get the same 404 as a missing space."""
    space = await space_service.get_space_by_slug(spaceSlug, session)
    space_user = await space_service.get_space_user(space, user, session)
    structlog.contextvars.bind_contextvars(
        space_id=str(space.id), space_user_id=str(space_user.id)
    )
    return AuthenticatedSpaceUser(user=user, space=space, space_user=space_user)


# ---------------------------------------------------------------------------
# Role checks
# ---------------------------------------------------------------------------

async def require_member(
    auth: AuthenticatedSpaceUser = Depends(get_space_context),
) -> AuthenticatedSpaceUser:
    """Any active space member."""
    return auth


async def require_manager(
    auth: AuthenticatedSpaceUser = Depends(get_space_context),
) -> AuthenticatedSpaceUser:
    """Space owners and admins only."""
    if auth.role not in SPACE_MANAGER_ROLES:
        log.info("auth.permission_denied", user_id=str(auth.user_id), role=auth.role.value)
        raise PermissionDenied("Owner or admin access required")
    return auth

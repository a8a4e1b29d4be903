"""
Space service: space creation and space membership.
"""

from __future__ import annotations

import uuid

import sqlalchemy as sa
import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from level.core.errors import NotFound, ValidationFailed
from level.models.space import Space
from level.models.space_user import SpaceUser
from level.models.user import User
from level_shared.schemas.common import SpaceState, SpaceUserRole, SpaceUserState
from level_shared.schemas.spaces import SpaceCreateRequest

log = structlog.get_logger()

SPACE_NOT_FOUND = "Space not found"


async def get_space_by_slug(slug: str, session: AsyncSession) -> Space:
    """Get an active space by slug (case-insensitive); raises NotFound."""
    result = await session.execute(
        select(Space).where(
            sa.func.lower(Space.slug) == sa.func.lower(slug),
            Space.state == SpaceState.ACTIVE.value,
        )
    )
    space = result.scalar_one_or_none()
    if not space:
        raise NotFound(SPACE_NOT_FOUND)
    return space


async def get_space_user(space: Space, user: User, session: AsyncSession) -> SpaceUser:
    """The user's active membership in ``space``.

    Non-members get the same NotFound as a missing space.
    """
    result = await session.execute(
        select(SpaceUser).where(
            SpaceUser.space_id == space.id,
            SpaceUser.user_id == user.id,
            SpaceUser.state == SpaceUserState.ACTIVE.value,
        )
    )
    space_user = result.scalar_one_or_none()
    if not space_user:
        raise NotFound(SPACE_NOT_FOUND)
    return space_user


async def create_space(
    user: User,
    req: SpaceCreateRequest,
    session: AsyncSession,
) -> tuple[Space, SpaceUser]:
    """Create a space and make the creator its owner."""
    existing = await session.execute(
        select(Space.id).where(sa.func.lower(Space.slug) == sa.func.lower(req.slug))
    )
    if existing.first() is not None:
        raise ValidationFailed("space", {"slug": ["has already been taken"]})

    space = Space(name=req.name, slug=req.slug, state=SpaceState.ACTIVE.value)
    session.add(space)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        if "spaces_lower_slug_index" in str(exc.orig):
            raise ValidationFailed("space", {"slug": ["has already been taken"]}) from exc
        raise

    space_user = await create_space_member(space, user, session, role=SpaceUserRole.OWNER)

    log.info("space.created", space_id=str(space.id), slug=space.slug, owner=str(user.id))
    return space, space_user


async def create_space_member(
    space: Space,
    user: User,
    session: AsyncSession,
    *,
    role: SpaceUserRole = SpaceUserRole.MEMBER,
) -> SpaceUser:
    """Add ``user`` to ``space``; a user can hold one membership per space."""
    existing = await session.execute(
        select(SpaceUser.id).where(
            SpaceUser.space_id == space.id, SpaceUser.user_id == user.id
        )
    )
    if existing.first() is not None:
        raise ValidationFailed("space_user", {"user": ["is already a member"]})

    space_user = SpaceUser(
        space_id=space.id,
        user_id=user.id,
        role=role.value,
        state=SpaceUserState.ACTIVE.value,
    )
    session.add(space_user)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        message = str(exc.orig)
        if "space_users_space_id_user_id_index" in message or (
            "space_users.space_id" in message and "space_users.user_id" in message
        ):
            raise ValidationFailed("space_user", {"user": ["is already a member"]}) from exc
        raise

    log.info(
        "space_user.created",
        space_id=str(space.id),
        user_id=str(user.id),
        role=role.value,
    )
    return space_user


async def get_space_user_by_id(
    space: Space,
    space_user_id: uuid.UUID,
    session: AsyncSession,
) -> SpaceUser:
    """An active space user of ``space`` by id; raises NotFound."""
    result = await session.execute(
        select(SpaceUser).where(
            SpaceUser.id == space_user_id,
            SpaceUser.space_id == space.id,
            SpaceUser.state == SpaceUserState.ACTIVE.value,
        )
    )
    space_user = result.scalar_one_or_none()
    if not space_user:
        raise NotFound("Space user not found")
    return space_user

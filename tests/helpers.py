"""
Test data builders.

Users are inserted directly (no password hashing) to keep domain tests fast.
"""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from level.models.group import Group
from level.models.space import Space
from level.models.space_user import SpaceUser
from level.models.user import User
from level.services import groups as group_service
from level.services import spaces as space_service
from level_shared.schemas.common import SpaceUserRole
from level_shared.schemas.groups import GroupCreateRequest


def _unique() -> str:
    return uuid.uuid4().hex[:10]


async def insert_user(session: AsyncSession, **overrides) -> User:
    attrs = {
        "email": f"user-{_unique()}@example.com",
        "first_name": "Jane",
        "last_name": "Doe",
    }
    attrs.update(overrides)
    user = User(**attrs)
    session.add(user)
    await session.flush()
    return user


async def create_user_and_space(session: AsyncSession) -> dict:
    """A user owning a fresh space."""
    user = await insert_user(session)
    slug = f"space-{_unique()}"
    space = Space(name="Test Space", slug=slug)
    session.add(space)
    await session.flush()
    space_user = await space_service.create_space_member(
        space, user, session, role=SpaceUserRole.OWNER
    )
    return {"user": user, "space": space, "space_user": space_user}


async def create_space_member(session: AsyncSession, space: Space) -> dict:
    user = await insert_user(session)
    space_user = await space_service.create_space_member(space, user, session)
    return {"user": user, "space_user": space_user}


def valid_group_params(**overrides) -> GroupCreateRequest:
    attrs = {
        "name": f"group-{_unique()}",
        "description": "A place to talk",
        "is_private": False,
    }
    attrs.update(overrides)
    return GroupCreateRequest(**attrs)


async def create_group(
    session: AsyncSession, space_user: SpaceUser, **overrides
) -> Group:
    return await group_service.create_group(
        space_user, valid_group_params(**overrides), session
    )

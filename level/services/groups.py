"""
Group service: visibility rules, creation, membership and lifecycle.

A group is visible to a space user when it lives in the user's space and is
either public or has a membership row for that user. Listing and single
lookup share the same predicate, so a hidden group is indistinguishable from
a missing one.
"""

from __future__ import annotations

import uuid
from typing import Optional, Union

import sqlalchemy as sa
import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select
from sqlmodel.sql.expression import SelectOfScalar

from level.core.errors import NotAMember, NotFound, ValidationFailed
from level.models.group import OPEN_NAME_INDEX, Group
from level.models.group_user import MEMBERSHIP_INDEX, GroupUser
from level.models.space_user import SpaceUser
from level_shared.schemas.common import GroupState
from level_shared.schemas.groups import GroupCreateRequest

log = structlog.get_logger()

GROUP_NOT_FOUND = "Group not found"
CANT_BE_BLANK = "can't be blank"
ALREADY_TAKEN = "has already been taken"
ALREADY_MEMBER = "is already a member"

_MEMBERSHIP_COLUMNS = ("group_users.space_user_id", "group_users.group_id")


def _violated(exc: IntegrityError, index_name: str, *columns: str) -> bool:
    """Whether ``exc`` reports a violation of the named unique index.

    PostgreSQL names the index; SQLite lists the offending columns instead.
    """
    message = str(exc.orig)
    return index_name in message or (bool(columns) and all(c in message for c in columns))


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def visible_to(space_user: SpaceUser) -> sa.ColumnElement[bool]:
    """Predicate matching the groups ``space_user`` is allowed to see."""
    is_member = (
        sa.exists()
        .where(GroupUser.group_id == Group.id)
        .where(GroupUser.space_user_id == space_user.id)
    )
    return sa.and_(
        Group.space_id == space_user.space_id,
        sa.or_(sa.not_(Group.is_private), is_member),
    )


def list_groups_query(space_user: SpaceUser) -> SelectOfScalar[Group]:
    """Unexecuted query over the groups visible to ``space_user``."""
    return select(Group).where(visible_to(space_user))


async def list_groups(
    space_user: SpaceUser,
    session: AsyncSession,
    *,
    state: Optional[GroupState] = None,
) -> list[Group]:
    """Visible groups ordered by name, optionally restricted to one state."""
    query = list_groups_query(space_user)
    if state is not None:
        query = query.where(Group.state == state.value)
    result = await session.execute(query.order_by(sa.func.lower(Group.name), Group.id))
    return list(result.scalars().all())


async def get_group(
    space_user: SpaceUser,
    group_id: Union[uuid.UUID, str],
    session: AsyncSession,
) -> Group:
    """Fetch a visible group by id; raises NotFound otherwise."""
    if not isinstance(group_id, uuid.UUID):
        try:
            group_id = uuid.UUID(str(group_id))
        except ValueError:
            raise NotFound(GROUP_NOT_FOUND)

    result = await session.execute(
        list_groups_query(space_user).where(Group.id == group_id)
    )
    group = result.scalar_one_or_none()
    if not group:
        raise NotFound(GROUP_NOT_FOUND)
    return group


# ---------------------------------------------------------------------------
# Creation & lifecycle
# ---------------------------------------------------------------------------

async def _open_name_taken(space_id: uuid.UUID, name: str, session: AsyncSession) -> bool:
    result = await session.execute(
        select(Group.id).where(
            Group.space_id == space_id,
            Group.state == GroupState.OPEN.value,
            sa.func.lower(Group.name) == sa.func.lower(name),
        )
    )
    return result.first() is not None


async def create_group(
    space_user: SpaceUser,
    req: GroupCreateRequest,
    session: AsyncSession,
) -> Group:
    """Create a group and make its creator a member, all or nothing.

    Errors are keyed to the failing step: ``group`` for the group row itself,
    ``group_user`` for the creator's membership.
    """
    if not req.name or not req.name.strip():
        raise ValidationFailed("group", {"name": [CANT_BE_BLANK]})

    if await _open_name_taken(space_user.space_id, req.name, session):
        raise ValidationFailed("group", {"name": [ALREADY_TAKEN]})

    group = Group(
        space_id=space_user.space_id,
        creator_id=space_user.id,
        name=req.name,
        description=req.description,
        is_private=req.is_private,
        state=GroupState.OPEN.value,
    )
    session.add(group)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        if _violated(exc, OPEN_NAME_INDEX):
            raise ValidationFailed("group", {"name": [ALREADY_TAKEN]}) from exc
        raise

    membership = GroupUser(
        space_id=group.space_id,
        space_user_id=space_user.id,
        group_id=group.id,
    )
    session.add(membership)
    try:
        await session.flush()
    except IntegrityError as exc:
        # Rolls the group insert back with it.
        await session.rollback()
        if _violated(exc, MEMBERSHIP_INDEX, *_MEMBERSHIP_COLUMNS):
            raise ValidationFailed("group_user", {"user": [ALREADY_MEMBER]}) from exc
        raise

    log.info(
        "group.created",
        group_id=str(group.id),
        space_id=str(group.space_id),
        creator_id=str(space_user.id),
        is_private=group.is_private,
    )
    return group


async def close_group(group: Group, session: AsyncSession) -> Group:
    """Transition a group to CLOSED. Closing a closed group is a no-op."""
    if group.state == GroupState.CLOSED.value:
        return group

    group.state = GroupState.CLOSED.value
    session.add(group)
    await session.flush()

    log.info("group.closed", group_id=str(group.id), space_id=str(group.space_id))
    return group


# ---------------------------------------------------------------------------
# Membership
# ---------------------------------------------------------------------------

async def get_group_membership(
    group: Group,
    space_user: SpaceUser,
    session: AsyncSession,
) -> GroupUser:
    """Fetch the membership row for (group, space_user); raises NotAMember."""
    result = await session.execute(
        select(GroupUser).where(
            GroupUser.group_id == group.id,
            GroupUser.space_user_id == space_user.id,
        )
    )
    group_user = result.scalar_one_or_none()
    if not group_user:
        raise NotAMember()
    return group_user


async def create_group_membership(
    group: Group,
    space_user: SpaceUser,
    session: AsyncSession,
) -> GroupUser:
    """Add ``space_user`` to ``group``; a duplicate pair fails validation."""
    try:
        await get_group_membership(group, space_user, session)
    except NotAMember:
        pass
    else:
        raise ValidationFailed("group_user", {"user": [ALREADY_MEMBER]})

    group_user = GroupUser(
        space_id=group.space_id,
        space_user_id=space_user.id,
        group_id=group.id,
    )
    session.add(group_user)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        if _violated(exc, MEMBERSHIP_INDEX, *_MEMBERSHIP_COLUMNS):
            raise ValidationFailed("group_user", {"user": [ALREADY_MEMBER]}) from exc
        raise

    log.info(
        "group_membership.created",
        group_id=str(group.id),
        space_user_id=str(space_user.id),
    )
    return group_user

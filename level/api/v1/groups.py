"""
Group API endpoints.

GET  /api/v1/spaces/{spaceSlug}/groups                        — List visible groups
POST /api/v1/spaces/{spaceSlug}/groups                        — Create a group
GET  /api/v1/spaces/{spaceSlug}/groups/{groupId}              — Get a visible group
POST /api/v1/spaces/{spaceSlug}/groups/{groupId}/close        — Close a group
GET  /api/v1/spaces/{spaceSlug}/groups/{groupId}/membership   — Requester's membership
POST /api/v1/spaces/{spaceSlug}/groups/{groupId}/memberships  — Add a space member
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from level.core.auth import AuthenticatedSpaceUser, require_member
from level.core.database import get_session
from level.services import groups as group_service
from level.services import spaces as space_service
from level_shared.schemas.common import GroupState
from level_shared.schemas.groups import (
    GroupCreateRequest,
    GroupListResponse,
    GroupMembershipCreateRequest,
    GroupResponse,
    GroupUserResponse,
)

router = APIRouter()


@router.get("", response_model=GroupListResponse)
async def list_groups(
    state: Optional[GroupState] = None,
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    """List the groups the requester can see."""
    groups = await group_service.list_groups(auth.space_user, session, state=state)
    return GroupListResponse(data=[GroupResponse.model_validate(g) for g in groups])


@router.post("", response_model=GroupResponse, status_code=201)
async def create_group(
    body: GroupCreateRequest,
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    """Create a group. The creator is added as its first member."""
    group = await group_service.create_group(auth.space_user, body, session)
    return GroupResponse.model_validate(group)


@router.get("/{groupId}", response_model=GroupResponse)
async def get_group(
    groupId: str,
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    group = await group_service.get_group(auth.space_user, groupId, session)
    return GroupResponse.model_validate(group)


@router.post("/{groupId}/close", response_model=GroupResponse)
async def close_group(
    groupId: str,
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    group = await group_service.get_group(auth.space_user, groupId, session)
    group = await group_service.close_group(group, session)
    return GroupResponse.model_validate(group)


@router.get("/{groupId}/membership", response_model=GroupUserResponse)
async def get_membership(
    groupId: str,
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    """The requester's own membership in the group."""
    group = await group_service.get_group(auth.space_user, groupId, session)
    group_user = await group_service.get_group_membership(group, auth.space_user, session)
    return GroupUserResponse.model_validate(group_user)


@router.post("/{groupId}/memberships", response_model=GroupUserResponse, status_code=201)
async def create_membership(
    groupId: str,
    body: GroupMembershipCreateRequest,
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    """Add a member of the same space to the group."""
    group = await group_service.get_group(auth.space_user, groupId, session)
    space_user = await space_service.get_space_user_by_id(auth.space, body.space_user_id, session)
    group_user = await group_service.create_group_membership(group, space_user, session)
    return GroupUserResponse.model_validate(group_user)

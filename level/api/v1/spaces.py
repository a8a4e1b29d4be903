"""
Space API endpoints.

POST /api/v1/spaces                       — Create a space (creator becomes owner)
GET  /api/v1/spaces/{spaceSlug}           — Get the space
POST /api/v1/spaces/{spaceSlug}/members   — Add an existing user (owner/admin only)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from level.core.auth import (
    AuthenticatedSpaceUser,
    get_current_user,
    require_manager,
    require_member,
)
from level.core.database import get_session
from level.models.user import User
from level.services import spaces as space_service
from level.services import users as user_service
from level_shared.schemas.spaces import (
    SpaceCreateRequest,
    SpaceCreateResponse,
    SpaceMemberAddRequest,
    SpaceResponse,
    SpaceUserResponse,
)

# ---------------------------------------------------------------------------
# Non-space-scoped routes
# ---------------------------------------------------------------------------
router_global = APIRouter()


@router_global.post("/spaces", response_model=SpaceCreateResponse, status_code=201)
async def create_space(
    body: SpaceCreateRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """Create a new space. The creator becomes its owner."""
    space, space_user = await space_service.create_space(user, body, session)
    return SpaceCreateResponse(
        space=SpaceResponse.model_validate(space),
        space_user=SpaceUserResponse.model_validate(space_user),
    )


# ---------------------------------------------------------------------------
# Space-scoped routes
# ---------------------------------------------------------------------------
router_scoped = APIRouter()


@router_scoped.get("", response_model=SpaceResponse)
async def get_space(auth: AuthenticatedSpaceUser = Depends(require_member)):
    return SpaceResponse.model_validate(auth.space)


@router_scoped.post("/members", response_model=SpaceUserResponse, status_code=201)
async def add_member(
    body: SpaceMemberAddRequest,
    auth: AuthenticatedSpaceUser = Depends(require_manager),
    session: AsyncSession = Depends(get_session),
):
    """Add an existing user to the space (Owner/Admin only)."""
    user = await user_service.get_user_by_email(body.email, session)
    space_user = await space_service.create_space_member(
        auth.space, user, session, role=body.role
    )
    return SpaceUserResponse.model_validate(space_user)

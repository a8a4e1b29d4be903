"""
Space-related schemas.

Covers: space creation, space membership (space users).
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from .common import SpaceState, SpaceUserRole, SpaceUserState, UTCDateTime


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class SpaceCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Space display name")
    slug: str = Field(
        ...,
        min_length=2,
        max_length=63,
        pattern=r"^[A-Za-z0-9][A-Za-z0-9-]*[A-Za-z0-9]$",
        description="URL-safe space identifier (case-insensitive)",
    )


class SpaceMemberAddRequest(BaseModel):
    """Add an existing user to the space."""
    email: str
    role: SpaceUserRole = SpaceUserRole.MEMBER


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class SpaceResponse(BaseModel):
    id: uuid.UUID
    name: str
    slug: str
    state: SpaceState
    inserted_at: UTCDateTime

    model_config = {"from_attributes": True}


class SpaceUserResponse(BaseModel):
    id: uuid.UUID
    space_id: uuid.UUID
    user_id: uuid.UUID
    role: SpaceUserRole
    state: SpaceUserState

    model_config = {"from_attributes": True}


class SpaceCreateResponse(BaseModel):
    space: SpaceResponse
    space_user: SpaceUserResponse

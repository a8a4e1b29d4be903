"""Group schemas."""

from __future__ import annotations

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from .common import GroupState, UTCDateTime


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class GroupCreateRequest(BaseModel):
    # Blank names are rejected by the service so the error carries the
    # field-level message.
    name: str = Field(default="", max_length=255)
    description: Optional[str] = None
    is_private: bool = False


class GroupMembershipCreateRequest(BaseModel):
    space_user_id: uuid.UUID


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class GroupResponse(BaseModel):
    id: uuid.UUID
    space_id: uuid.UUID
    creator_id: uuid.UUID
    name: str
    description: Optional[str] = None
    is_private: bool
    state: GroupState
    inserted_at: UTCDateTime
    updated_at: UTCDateTime

    model_config = {"from_attributes": True}


class GroupListResponse(BaseModel):
    data: list[GroupResponse]


class GroupUserResponse(BaseModel):
    id: uuid.UUID
    space_id: uuid.UUID
    space_user_id: uuid.UUID
    group_id: uuid.UUID
    inserted_at: UTCDateTime

    model_config = {"from_attributes": True}

"""Post schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel

from .common import PostState, UTCDateTime


class PostCreateRequest(BaseModel):
    body: str = ""


class PostResponse(BaseModel):
    id: uuid.UUID
    space_id: uuid.UUID
    space_user_id: uuid.UUID
    body: str
    state: PostState
    inserted_at: UTCDateTime

    model_config = {"from_attributes": True}


class PostListResponse(BaseModel):
    data: list[PostResponse]

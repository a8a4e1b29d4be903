"""User and token schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, EmailStr, Field

from .common import UserState, UTCDateTime


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class UserCreateRequest(BaseModel):
    """Sign up a new user."""
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=6)
    time_zone: str = "UTC"


class UserTokenRequest(BaseModel):
    email: str
    password: str


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    time_zone: str
    state: UserState
    inserted_at: UTCDateTime

    model_config = {"from_attributes": True}


class UserTokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_at: UTCDateTime

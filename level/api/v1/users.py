"""
User API endpoints.

POST /api/v1/users        — Sign up
POST /api/v1/user_tokens  — Exchange email/password for a bearer token
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from level.core.auth import create_jwt
from level.core.database import get_session
from level.services import users as user_service
from level_shared.schemas.users import (
    UserCreateRequest,
    UserResponse,
    UserTokenRequest,
    UserTokenResponse,
)

router = APIRouter()


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(
    body: UserCreateRequest,
    session: AsyncSession = Depends(get_session),
):
    """Sign up a new user."""
    user = await user_service.create_user(body, session)
    return UserResponse.model_validate(user)


@router.post("/user_tokens", response_model=UserTokenResponse, status_code=201)
async def create_user_token(
    body: UserTokenRequest,
    session: AsyncSession = Depends(get_session),
):
    """Issue a bearer token for valid credentials."""
    user = await user_service.authenticate(body.email, body.password, session)
    token, expires_at = create_jwt(user.id)
    return UserTokenResponse(token=token, expires_at=expires_at)

"""
Post API endpoints.

GET  /api/v1/spaces/{spaceSlug}/posts  — List open posts
POST /api/v1/spaces/{spaceSlug}/posts  — Create a post
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from level.core.auth import AuthenticatedSpaceUser, require_member
from level.core.database import get_session
from level.services import posts as post_service
from level_shared.schemas.posts import PostCreateRequest, PostListResponse, PostResponse

router = APIRouter()


@router.get("", response_model=PostListResponse)
async def list_posts(
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    posts = await post_service.list_posts(auth.space_user, session)
    return PostListResponse(data=[PostResponse.model_validate(p) for p in posts])


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    body: PostCreateRequest,
    auth: AuthenticatedSpaceUser = Depends(require_member),
    session: AsyncSession = Depends(get_session),
):
    post = await post_service.create_post(auth.space_user, body, session)
    return PostResponse.model_validate(post)

"""Post service."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select
from sqlmodel.sql.expression import SelectOfScalar

from level.core.errors import ValidationFailed
from level.models.post import Post
from level.models.space_user import SpaceUser
from level_shared.schemas.common import PostState
from level_shared.schemas.posts import PostCreateRequest

log = structlog.get_logger()


def list_posts_query(space_user: SpaceUser) -> SelectOfScalar[Post]:
    """Open posts in the requester's space, newest first."""
    return (
        select(Post)
        .where(Post.space_id == space_user.space_id, Post.state == PostState.OPEN.value)
        .order_by(Post.inserted_at.desc(), Post.id)
    )


async def list_posts(space_user: SpaceUser, session: AsyncSession) -> list[Post]:
    result = await session.execute(list_posts_query(space_user))
    return list(result.scalars().all())


async def create_post(
    space_user: SpaceUser,
    req: PostCreateRequest,
    session: AsyncSession,
) -> Post:
    if not req.body or not req.body.strip():
        raise ValidationFailed("post", {"body": ["can't be blank"]})

    post = Post(
        space_id=space_user.space_id,
        space_user_id=space_user.id,
        body=req.body,
        state=PostState.OPEN.value,
    )
    session.add(post)
    await session.flush()

    log.info("post.created", post_id=str(post.id), space_id=str(post.space_id))
    return post

"""
Tests for the Posts service.
"""

from __future__ import annotations

import pytest

from level.core.errors import ValidationFailed
from level.services import posts as post_service
from level_shared.schemas.common import PostState
from level_shared.schemas.posts import PostCreateRequest

from tests.helpers import create_space_member, create_user_and_space


class TestCreatePost:

    @pytest.mark.asyncio
    async def test_creates_post_in_author_space(self, session):
        ctx = await create_user_and_space(session)

        post = await post_service.create_post(
            ctx["space_user"], PostCreateRequest(body="Hello, team"), session
        )
        assert post.space_id == ctx["space"].id
        assert post.space_user_id == ctx["space_user"].id
        assert post.state == PostState.OPEN.value

    @pytest.mark.asyncio
    async def test_errors_given_blank_body(self, session):
        ctx = await create_user_and_space(session)

        with pytest.raises(ValidationFailed) as exc_info:
            await post_service.create_post(
                ctx["space_user"], PostCreateRequest(body=" "), session
            )
        assert exc_info.value.errors == {"body": ["can't be blank"]}


class TestListPosts:

    @pytest.mark.asyncio
    async def test_scoped_to_space(self, session):
        ctx = await create_user_and_space(session)
        member = await create_space_member(session, ctx["space"])
        foreign = await create_user_and_space(session)

        mine = await post_service.create_post(
            ctx["space_user"], PostCreateRequest(body="ours"), session
        )
        await post_service.create_post(
            foreign["space_user"], PostCreateRequest(body="theirs"), session
        )

        posts = await post_service.list_posts(member["space_user"], session)
        assert [p.id for p in posts] == [mine.id]

"""
Script to create a user, a space owned by that user, and the schema, for local testing.
"""

import argparse
import asyncio

import structlog

from level.core.config import get_settings
from level.core.database import init_db, session_scope
from level.core.errors import NotFound
from level.core.logs import configure_logging
from level.services import spaces as space_service
from level.services import users as user_service
from level_shared.schemas.spaces import SpaceCreateRequest
from level_shared.schemas.users import UserCreateRequest

settings = get_settings()
log = structlog.get_logger()


async def create_local_space(email: str, password: str, slug: str, name: str) -> None:
    await init_db()

    async with session_scope() as session:
        try:
            user = await user_service.get_user_by_email(email, session)
            log.info("setup.user_exists", email=email)
        except NotFound:
            user = await user_service.create_user(
                UserCreateRequest(
                    email=email,
                    first_name=email.split("@")[0],
                    last_name="Admin",
                    password=password,
                ),
                session,
            )

        try:
            space = await space_service.get_space_by_slug(slug, session)
            log.info("setup.space_exists", slug=slug)
        except NotFound:
            space, _ = await space_service.create_space(
                user, SpaceCreateRequest(name=name, slug=slug), session
            )

    log.info("setup.done", space_id=str(space.id), user_id=str(user.id))


def run() -> None:
    parser = argparse.ArgumentParser(description="Create a local user and space.")
    parser.add_argument("--email", required=True, help="Email address for the owner")
    parser.add_argument("--password", required=True, help="Password for the owner")
    parser.add_argument("--slug", default="local", help="Space slug (default: local)")
    parser.add_argument("--name", default="Local Space", help="Space display name")
    args = parser.parse_args()

    configure_logging(settings.log_level, "text")
    asyncio.run(create_local_space(args.email, args.password, args.slug, args.name))


if __name__ == "__main__":
    run()

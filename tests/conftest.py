"""Shared fixtures: a fresh SQLite database per test."""

import os

# Must be set before anything imports level.core.database.
os.environ.setdefault("LEVEL_DATABASE_URL", "sqlite+aiosqlite:///./level_test.db")
os.environ.setdefault("LEVEL_SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("LEVEL_BCRYPT_ROUNDS", "4")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from level.core.database import build_engine, get_session, init_db, session_scope
from level.main import app


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'level.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_session():
        async with session_scope(session_factory) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

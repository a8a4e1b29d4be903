"""
Tests for users, credentials and tokens.

Tests cover:
- Password hashing and JWT helpers
- Signup with case-insensitive email uniqueness
- Credential checks
"""

from __future__ import annotations

import uuid
from datetime import timedelta

import jwt
import pytest

from level.core.auth import create_jwt, decode_jwt, hash_password, verify_password
from level.core.errors import AuthenticationFailed, NotFound, ValidationFailed
from level.services import users as user_service
from level_shared.schemas.users import UserCreateRequest


def _signup(**overrides) -> UserCreateRequest:
    attrs = {
        "email": "jane@example.com",
        "first_name": "Jane",
        "last_name": "Doe",
        "password": "s3cret-pass",
    }
    attrs.update(overrides)
    return UserCreateRequest(**attrs)


class TestPasswordAndTokens:

    def test_hash_and_verify(self):
        hashed = hash_password("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("wrong", hashed)

    def test_jwt_carries_user_id(self):
        user_id = uuid.uuid4()
        token, expires_at = create_jwt(user_id)
        payload = decode_jwt(token)
        assert payload["sub"] == str(user_id)
        assert payload["exp"] == int(expires_at.timestamp())

    def test_expired_jwt_is_rejected(self):
        token, _ = create_jwt(uuid.uuid4(), expires_delta=timedelta(seconds=-1))
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_jwt(token)


class TestUserCreateRequestValidation:

    def test_invalid_email(self):
        with pytest.raises(Exception):
            _signup(email="not-an-email")

    def test_accepts_regular_address(self):
        assert _signup(email="jane@example.com").email == "jane@example.com"

    def test_short_password(self):
        with pytest.raises(Exception):
            _signup(password="123")

    def test_default_time_zone(self):
        assert _signup().time_zone == "UTC"


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(self, session):
        user = await user_service.create_user(_signup(), session)

        assert user.email == "jane@example.com"
        assert user.password_hash
        assert verify_password("s3cret-pass", user.password_hash)

    @pytest.mark.asyncio
    async def test_email_is_unique_case_insensitively(self, session):
        await user_service.create_user(_signup(), session)

        with pytest.raises(ValidationFailed) as exc_info:
            await user_service.create_user(_signup(email="JANE@example.com"), session)
        assert exc_info.value.errors == {"email": ["has already been taken"]}

    @pytest.mark.asyncio
    async def test_lookup_by_email_is_case_insensitive(self, session):
        user = await user_service.create_user(_signup(), session)

        found = await user_service.get_user_by_email("Jane@Level.Test", session)
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, session):
        with pytest.raises(NotFound):
            await user_service.get_user(uuid.uuid4(), session)


class TestAuthenticate:

    @pytest.mark.asyncio
    async def test_valid_credentials(self, session):
        user = await user_service.create_user(_signup(), session)

        authed = await user_service.authenticate("jane@example.com", "s3cret-pass", session)
        assert authed.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, session):
        await user_service.create_user(_signup(), session)

        with pytest.raises(AuthenticationFailed):
            await user_service.authenticate("jane@example.com", "nope-nope", session)

    @pytest.mark.asyncio
    async def test_unknown_email(self, session):
        with pytest.raises(AuthenticationFailed):
            await user_service.authenticate("ghost@example.com", "whatever", session)

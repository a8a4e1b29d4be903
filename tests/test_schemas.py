"""Tests for response schema serialization."""

import uuid
from datetime import datetime, timedelta, timezone

from level_shared.schemas.posts import PostResponse


def _post(inserted_at: datetime) -> PostResponse:
    return PostResponse(
        id=uuid.uuid4(),
        space_id=uuid.uuid4(),
        space_user_id=uuid.uuid4(),
        body="Hello",
        state="OPEN",
        inserted_at=inserted_at,
    )


class TestTimestamps:

    def test_naive_values_are_read_as_utc(self):
        post = _post(datetime(2026, 1, 2, 3, 4, 5))
        assert post.inserted_at.tzinfo == timezone.utc
        assert post.model_dump(mode="json")["inserted_at"] == "2026-01-02T03:04:05Z"

    def test_aware_values_are_converted_to_utc(self):
        offset = timezone(timedelta(hours=2))
        post = _post(datetime(2026, 1, 2, 5, 4, 5, tzinfo=offset))
        assert post.model_dump(mode="json")["inserted_at"] == "2026-01-02T03:04:05Z"

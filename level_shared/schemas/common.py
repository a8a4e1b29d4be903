from datetime import datetime, timezone
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel


class SpaceState(str, Enum):
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class UserState(str, Enum):
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class SpaceUserRole(str, Enum):
    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class SpaceUserState(str, Enum):
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class GroupState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class PostState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


# Roles allowed to manage space membership
SPACE_MANAGER_ROLES: frozenset[SpaceUserRole] = frozenset(
    {SpaceUserRole.OWNER, SpaceUserRole.ADMIN}
)


class ErrorDetail(BaseModel):
    code: str
    message: str
    status: int
    step: str | None = None
    errors: dict[str, list[str]] | None = None


class ErrorResponse(BaseModel):
    error: ErrorDetail


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on read; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Timestamps in responses always serialize with an explicit UTC offset.
UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]

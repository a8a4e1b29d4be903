"""Group model (a channel within a space)."""

from typing import Optional
import uuid

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import TimestampMixin, UUIDMixin


class Group(UUIDMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "groups"

    space_id: uuid.UUID = Field(foreign_key="spaces.id", nullable=False, index=True)
    creator_id: uuid.UUID = Field(foreign_key="space_users.id", nullable=False)
    name: str = Field(nullable=False)
    description: Optional[str] = None
    is_private: bool = Field(
        default=False,
        nullable=False,
        sa_column_kwargs={"server_default": sa.false()},
    )
    state: str = Field(default="OPEN", nullable=False)  # OPEN | CLOSED


# Names are unique per space only among OPEN groups, so a closed group's name
# can be reused.
OPEN_NAME_INDEX = "groups_unique_names_when_open"

sa.Index(
    OPEN_NAME_INDEX,
    Group.space_id,
    sa.func.lower(Group.name),
    unique=True,
    postgresql_where=Group.state == "OPEN",
    sqlite_where=Group.state == "OPEN",
)

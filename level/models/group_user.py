"""Group membership (join table between groups and space users)."""

import uuid

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import TimestampMixin, UUIDMixin

MEMBERSHIP_INDEX = "group_users_space_user_id_group_id_index"


class GroupUser(UUIDMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "group_users"
    __table_args__ = (
        sa.UniqueConstraint("space_user_id", "group_id", name=MEMBERSHIP_INDEX),
    )

    space_id: uuid.UUID = Field(foreign_key="spaces.id", nullable=False)
    space_user_id: uuid.UUID = Field(foreign_key="space_users.id", nullable=False)
    group_id: uuid.UUID = Field(foreign_key="groups.id", nullable=False)

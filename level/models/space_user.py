"""Space membership: a user's identity within one space."""

import uuid

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import TimestampMixin, UUIDMixin


class SpaceUser(UUIDMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "space_users"
    __table_args__ = (
        sa.UniqueConstraint(
            "space_id", "user_id", name="space_users_space_id_user_id_index"
        ),
    )

    space_id: uuid.UUID = Field(foreign_key="spaces.id", nullable=False, index=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", nullable=False, index=True)
    role: str = Field(default="MEMBER", nullable=False)  # OWNER | ADMIN | MEMBER
    state: str = Field(default="ACTIVE", nullable=False)  # ACTIVE | DISABLED

"""Post model."""

import uuid

from sqlmodel import Field, SQLModel

from .base import TimestampMixin, UUIDMixin


class Post(UUIDMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "posts"

    space_id: uuid.UUID = Field(foreign_key="spaces.id", nullable=False, index=True)
    space_user_id: uuid.UUID = Field(foreign_key="space_users.id", nullable=False)
    body: str = Field(nullable=False)
    state: str = Field(default="OPEN", nullable=False)  # OPEN | CLOSED

"""User model."""

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import TimestampMixin, UUIDMixin


class User(UUIDMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "users"

    email: str = Field(nullable=False)
    first_name: str = Field(nullable=False)
    last_name: str = Field(nullable=False)
    time_zone: str = Field(default="UTC", nullable=False)
    password_hash: Optional[str] = Field(default=None)  # bcrypt
    state: str = Field(default="ACTIVE", nullable=False)  # ACTIVE | DISABLED


sa.Index("users_lower_email_index", sa.func.lower(User.email), unique=True)

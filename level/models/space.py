"""Space model (tenant container)."""

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import TimestampMixin, UUIDMixin


class Space(UUIDMixin, TimestampMixin, SQLModel, table=True):
    __tablename__ = "spaces"

    name: str = Field(nullable=False)
    slug: str = Field(nullable=False)
    state: str = Field(default="ACTIVE", nullable=False)  # ACTIVE | DISABLED


# Slugs are case-insensitive across all spaces.
sa.Index("spaces_lower_slug_index", sa.func.lower(Space.slug), unique=True)

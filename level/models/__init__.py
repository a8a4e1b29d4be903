# SQLModel definitions, imported so the metadata is populated.
from .base import UUIDMixin, TimestampMixin  # noqa: F401
from .space import Space  # noqa: F401
from .user import User  # noqa: F401
from .space_user import SpaceUser  # noqa: F401
from .group import Group  # noqa: F401
from .group_user import GroupUser  # noqa: F401
from .post import Post  # noqa: F401

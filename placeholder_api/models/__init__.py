"""ORM Models — SQLAlchemy declarative models for the six resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - users is the root; posts/albums/todos reference it, comments reference
      posts, photos reference albums

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all or alembic autogenerate runs
"""

from placeholder_api.models.user import User  # noqa: F401
from placeholder_api.models.post import Post  # noqa: F401
from placeholder_api.models.comment import Comment  # noqa: F401
from placeholder_api.models.album import Album  # noqa: F401
from placeholder_api.models.photo import Photo  # noqa: F401
from placeholder_api.models.todo import Todo  # noqa: F401

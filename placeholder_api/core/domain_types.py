"""Domain Types — identity types and resource names shared across layers.

Invariants:
    - UserId, PostId, AlbumId identify parent resources in child lookups;
      they wrap ints because primary keys are auto-increment integers
    - Resource values are the URL collection names under /api

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and log records without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
AlbumId = NewType("AlbumId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Resource(str, Enum):
    """The six resource collections exposed by the API."""
    USERS = "users"
    POSTS = "posts"
    COMMENTS = "comments"
    ALBUMS = "albums"
    PHOTOS = "photos"
    TODOS = "todos"

    @property
    def label(self) -> str:
        """Singular, capitalized name used in messages ("User", "Post", ...)."""
        return self.value[:-1].capitalize()

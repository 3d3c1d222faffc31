"""Post Schemas — create/update validation and the with-comments shape.

Invariants:
    - title 1-200 chars, body non-empty
    - userId existence is checked by PostService, not here
"""

from pydantic import Field

from placeholder_api.schemas.base import CamelModel, RefId, RequiredStr
from placeholder_api.schemas.comment import CommentResponse


class PostCreate(CamelModel):
    user_id: RefId
    title: RequiredStr = Field(max_length=200)
    body: RequiredStr


class PostUpdate(CamelModel):
    user_id: RefId | None = None
    title: RequiredStr | None = Field(None, max_length=200)
    body: RequiredStr | None = None


class PostResponse(CamelModel):
    id: int
    user_id: int
    title: str
    body: str


class PostWithCommentsResponse(PostResponse):
    """Post with its comments embedded (GET /api/posts/{id}/with-comments)."""
    comments: list[CommentResponse] = []

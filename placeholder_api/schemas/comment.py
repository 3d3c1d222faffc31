"""Comment Schemas — create/update validation for comments on posts.

Invariants:
    - name 1-100 chars, valid email, body non-empty
"""

from pydantic import EmailStr, Field

from placeholder_api.schemas.base import CamelModel, RefId, RequiredStr


class CommentCreate(CamelModel):
    post_id: RefId
    name: RequiredStr = Field(max_length=100)
    email: EmailStr
    body: RequiredStr


class CommentUpdate(CamelModel):
    post_id: RefId | None = None
    name: RequiredStr | None = Field(None, max_length=100)
    email: EmailStr | None = None
    body: RequiredStr | None = None


class CommentResponse(CamelModel):
    id: int
    post_id: int
    name: str
    email: str
    body: str

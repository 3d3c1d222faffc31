"""User Service — users with embedded address/company, unique keys and full cascade.

Invariants:
    - email and username stay unique: create and update raise DuplicateKeyError
      when another user already holds either value
    - delete removes the user's comments-on-posts, posts, photos-in-albums,
      albums and todos before the user, in one transaction
    - list_posts/list_albums/list_todos return [] for unknown users

Design Decisions:
    - Nested request shape flattened to columns by core/user_fields.py
    - Cascade issued as bulk deletes with subqueries on the parent FK
"""

import logging
from typing import Any

from sqlalchemy import or_, select

from placeholder_api.core.domain_types import Resource, UserId
from placeholder_api.core.errors import DuplicateKeyError, ErrorContext
from placeholder_api.core.user_fields import flatten_user_fields
from placeholder_api.models import Album, Comment, Photo, Post, Todo, User
from placeholder_api.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class UserService(ResourceService[User]):
    model = User
    resource = Resource.USERS

    async def list_posts(self, user_id: UserId) -> list[Post]:
        return await self.storage.posts.find_all(Post.user_id == user_id)

    async def list_albums(self, user_id: UserId) -> list[Album]:
        return await self.storage.albums.find_all(Album.user_id == user_id)

    async def list_todos(self, user_id: UserId) -> list[Todo]:
        return await self.storage.todos.find_all(Todo.user_id == user_id)

    def _to_columns(self, data: dict[str, Any]) -> dict[str, Any]:
        return flatten_user_fields(data)

    async def _check_unique(
        self, fields: dict[str, Any], exclude_id: int | None = None,
    ) -> None:
        conditions = [
            getattr(User, key) == fields[key]
            for key in ("email", "username") if key in fields
        ]
        if not conditions:
            return
        criteria = [or_(*conditions)]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        existing = await self.storage.users.find_first(*criteria)
        if existing is None:
            return
        clashes = [
            key for key in ("email", "username")
            if key in fields and getattr(existing, key) == fields[key]
        ]
        logger.warning(
            f"User write rejected: duplicate {', '.join(clashes)}",
            extra={"resource": self.resource.value, "error_code": "DUPLICATE_KEY"},
        )
        raise DuplicateKeyError(
            "User", clashes, ErrorContext(resource=self.resource.value),
        )

    async def _delete_children(self, entity_id: int) -> None:
        user_posts = select(Post.id).where(Post.user_id == entity_id)
        user_albums = select(Album.id).where(Album.user_id == entity_id)
        await self.storage.comments.delete_where(Comment.post_id.in_(user_posts))
        await self.storage.posts.delete_where(Post.user_id == entity_id)
        await self.storage.photos.delete_where(Photo.album_id.in_(user_albums))
        await self.storage.albums.delete_where(Album.user_id == entity_id)
        await self.storage.todos.delete_where(Todo.user_id == entity_id)

"""Service Dependencies — request-scoped service construction for route handlers.

Invariants:
    - One SqlStorage (one DB session, one transaction) per request; every
      service resolved in the same request shares it
    - Path ids are validated to the primary-key range before any query runs
"""

from typing import Annotated

from fastapi import Depends, Path

from placeholder_api.infrastructure.storage import SqlStorage, get_storage
from placeholder_api.schemas.base import MAX_ID
from placeholder_api.services.album_service import AlbumService
from placeholder_api.services.comment_service import CommentService
from placeholder_api.services.photo_service import PhotoService
from placeholder_api.services.post_service import PostService
from placeholder_api.services.todo_service import TodoService
from placeholder_api.services.user_service import UserService

# Same range as RefId in request bodies: out-of-range ids are a 400
PathId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_user_service(storage: SqlStorage = Depends(get_storage)) -> UserService:
    return UserService(storage)


def get_post_service(storage: SqlStorage = Depends(get_storage)) -> PostService:
    return PostService(storage)


def get_comment_service(storage: SqlStorage = Depends(get_storage)) -> CommentService:
    return CommentService(storage)


def get_album_service(storage: SqlStorage = Depends(get_storage)) -> AlbumService:
    return AlbumService(storage)


def get_photo_service(storage: SqlStorage = Depends(get_storage)) -> PhotoService:
    return PhotoService(storage)


def get_todo_service(storage: SqlStorage = Depends(get_storage)) -> TodoService:
    return TodoService(storage)

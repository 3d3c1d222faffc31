"""Service test fixtures — services wired to SqlStorage over the test session."""

import pytest

from placeholder_api.infrastructure.storage import SqlStorage
from placeholder_api.services.album_service import AlbumService
from placeholder_api.services.comment_service import CommentService
from placeholder_api.services.photo_service import PhotoService
from placeholder_api.services.post_service import PostService
from placeholder_api.services.todo_service import TodoService
from placeholder_api.services.user_service import UserService


@pytest.fixture
def storage(test_db):
    return SqlStorage(test_db)


@pytest.fixture
def user_service(storage):
    return UserService(storage)


@pytest.fixture
def post_service(storage):
    return PostService(storage)


@pytest.fixture
def comment_service(storage):
    return CommentService(storage)


@pytest.fixture
def album_service(storage):
    return AlbumService(storage)


@pytest.fixture
def photo_service(storage):
    return PhotoService(storage)


@pytest.fixture
def todo_service(storage):
    return TodoService(storage)

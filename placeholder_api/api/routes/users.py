"""Users — CRUD plus the posts/albums/todos owned by a user.

Invariants:
    - POST returns 201 with a Location header; duplicate email/username -> 409
    - PUT is a partial update; unknown id -> 404
    - DELETE cascades to posts, comments, albums, photos and todos -> 204
    - Relationship lists are [] (not 404) for unknown users
"""

from fastapi import APIRouter, Depends, Response, status

from placeholder_api.api.dependencies import PathId, get_user_service
from placeholder_api.core.errors import ResourceNotFoundError
from placeholder_api.schemas.album import AlbumResponse
from placeholder_api.schemas.post import PostResponse
from placeholder_api.schemas.todo import TodoResponse
from placeholder_api.schemas.user import UserCreate, UserResponse, UserUpdate
from placeholder_api.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return [UserResponse.from_model(u) for u in await service.list_all()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: PathId, service: UserService = Depends(get_user_service)):
    user = await service.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return UserResponse.from_model(user)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    user = await service.create(body)
    response.headers["Location"] = f"{router.prefix}/{user.id}"
    return UserResponse.from_model(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: PathId, body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    user = await service.update(user_id, body)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return UserResponse.from_model(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: PathId, service: UserService = Depends(get_user_service)):
    if not await service.delete(user_id):
        raise ResourceNotFoundError("User", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/posts", response_model=list[PostResponse])
async def list_user_posts(user_id: PathId, service: UserService = Depends(get_user_service)):
    return await service.list_posts(user_id)


@router.get("/{user_id}/albums", response_model=list[AlbumResponse])
async def list_user_albums(user_id: PathId, service: UserService = Depends(get_user_service)):
    return await service.list_albums(user_id)


@router.get("/{user_id}/todos", response_model=list[TodoResponse])
async def list_user_todos(user_id: PathId, service: UserService = Depends(get_user_service)):
    return await service.list_todos(user_id)

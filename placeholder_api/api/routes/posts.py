"""Posts — CRUD plus a post's comments, flat or embedded.

Invariants:
    - Unknown userId on create/update -> 400 REFERENCE_NOT_FOUND
    - DELETE cascades to the post's comments
    - /{id}/comments is [] for unknown posts; /{id}/with-comments is 404
"""

from fastapi import APIRouter, Depends, Response, status

from placeholder_api.api.dependencies import PathId, get_post_service
from placeholder_api.core.errors import ResourceNotFoundError
from placeholder_api.schemas.comment import CommentResponse
from placeholder_api.schemas.post import (
    PostCreate, PostResponse, PostUpdate, PostWithCommentsResponse,
)
from placeholder_api.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(service: PostService = Depends(get_post_service)):
    return await service.list_all()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: PathId, service: PostService = Depends(get_post_service)):
    post = await service.get_by_id(post_id)
    if post is None:
        raise ResourceNotFoundError("Post", post_id)
    return post


@router.post(
    "", response_model=PostResponse, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate,
    response: Response,
    service: PostService = Depends(get_post_service),
):
    post = await service.create(body)
    response.headers["Location"] = f"{router.prefix}/{post.id}"
    return post


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: PathId, body: PostUpdate,
    service: PostService = Depends(get_post_service),
):
    post = await service.update(post_id, body)
    if post is None:
        raise ResourceNotFoundError("Post", post_id)
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: PathId, service: PostService = Depends(get_post_service)):
    if not await service.delete(post_id):
        raise ResourceNotFoundError("Post", post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_post_comments(post_id: PathId, service: PostService = Depends(get_post_service)):
    return await service.list_comments(post_id)


@router.get("/{post_id}/with-comments", response_model=PostWithCommentsResponse)
async def get_post_with_comments(
    post_id: PathId, service: PostService = Depends(get_post_service),
):
    post = await service.get_with_comments(post_id)
    if post is None:
        raise ResourceNotFoundError("Post", post_id)
    return post

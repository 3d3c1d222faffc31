"""Comments — CRUD plus filtering by post."""

from fastapi import APIRouter, Depends, Response, status

from placeholder_api.api.dependencies import PathId, get_comment_service
from placeholder_api.core.errors import ResourceNotFoundError
from placeholder_api.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from placeholder_api.services.comment_service import CommentService

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(service: CommentService = Depends(get_comment_service)):
    return await service.list_all()


@router.get("/by-post/{post_id}", response_model=list[CommentResponse])
async def list_comments_by_post(
    post_id: PathId, service: CommentService = Depends(get_comment_service),
):
    return await service.list_by_post(post_id)


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(
    comment_id: PathId, service: CommentService = Depends(get_comment_service),
):
    comment = await service.get_by_id(comment_id)
    if comment is None:
        raise ResourceNotFoundError("Comment", comment_id)
    return comment


@router.post(
    "", response_model=CommentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    body: CommentCreate,
    response: Response,
    service: CommentService = Depends(get_comment_service),
):
    comment = await service.create(body)
    response.headers["Location"] = f"{router.prefix}/{comment.id}"
    return comment


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: PathId, body: CommentUpdate,
    service: CommentService = Depends(get_comment_service),
):
    comment = await service.update(comment_id, body)
    if comment is None:
        raise ResourceNotFoundError("Comment", comment_id)
    return comment


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: PathId, service: CommentService = Depends(get_comment_service),
):
    if not await service.delete(comment_id):
        raise ResourceNotFoundError("Comment", comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Todos — CRUD plus by-user, completed and pending views.

Invariants:
    - /completed and /pending together return every todo exactly once
"""

from fastapi import APIRouter, Depends, Response, status

from placeholder_api.api.dependencies import PathId, get_todo_service
from placeholder_api.core.errors import ResourceNotFoundError
from placeholder_api.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from placeholder_api.services.todo_service import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("", response_model=list[TodoResponse])
async def list_todos(service: TodoService = Depends(get_todo_service)):
    return await service.list_all()


@router.get("/completed", response_model=list[TodoResponse])
async def list_completed_todos(service: TodoService = Depends(get_todo_service)):
    return await service.list_completed()


@router.get("/pending", response_model=list[TodoResponse])
async def list_pending_todos(service: TodoService = Depends(get_todo_service)):
    return await service.list_pending()


@router.get("/by-user/{user_id}", response_model=list[TodoResponse])
async def list_todos_by_user(
    user_id: PathId, service: TodoService = Depends(get_todo_service),
):
    return await service.list_by_user(user_id)


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(todo_id: PathId, service: TodoService = Depends(get_todo_service)):
    todo = await service.get_by_id(todo_id)
    if todo is None:
        raise ResourceNotFoundError("Todo", todo_id)
    return todo


@router.post(
    "", response_model=TodoResponse, status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate,
    response: Response,
    service: TodoService = Depends(get_todo_service),
):
    todo = await service.create(body)
    response.headers["Location"] = f"{router.prefix}/{todo.id}"
    return todo


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: PathId, body: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
):
    todo = await service.update(todo_id, body)
    if todo is None:
        raise ResourceNotFoundError("Todo", todo_id)
    return todo


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: PathId, service: TodoService = Depends(get_todo_service)):
    if not await service.delete(todo_id):
        raise ResourceNotFoundError("Todo", todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Todo Schemas — create/update validation for todos."""

from pydantic import Field

from placeholder_api.schemas.base import CamelModel, RefId, RequiredStr


class TodoCreate(CamelModel):
    user_id: RefId
    title: RequiredStr = Field(max_length=200)
    completed: bool = False


class TodoUpdate(CamelModel):
    user_id: RefId | None = None
    title: RequiredStr | None = Field(None, max_length=200)
    completed: bool | None = None


class TodoResponse(CamelModel):
    id: int
    user_id: int
    title: str
    completed: bool

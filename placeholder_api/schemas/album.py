"""Album Schemas — create/update validation and the with-photos shape."""

from pydantic import Field

from placeholder_api.schemas.base import CamelModel, RefId, RequiredStr
from placeholder_api.schemas.photo import PhotoResponse


class AlbumCreate(CamelModel):
    user_id: RefId
    title: RequiredStr = Field(max_length=200)


class AlbumUpdate(CamelModel):
    user_id: RefId | None = None
    title: RequiredStr | None = Field(None, max_length=200)


class AlbumResponse(CamelModel):
    id: int
    user_id: int
    title: str


class AlbumWithPhotosResponse(AlbumResponse):
    """Album with its photos embedded (GET /api/albums/{id}/with-photos)."""
    photos: list[PhotoResponse] = []

"""Photo Schemas — create/update validation for photos in albums.

Invariants:
    - url and thumbnailUrl must be absolute http(s) URLs
    - stored strings are exactly what the client sent (no URL normalization)
"""

from pydantic import Field

from placeholder_api.schemas.base import CamelModel, HttpUrlStr, RefId, RequiredStr


class PhotoCreate(CamelModel):
    album_id: RefId
    title: RequiredStr = Field(max_length=200)
    url: HttpUrlStr = Field(max_length=2048)
    thumbnail_url: HttpUrlStr = Field(max_length=2048)


class PhotoUpdate(CamelModel):
    album_id: RefId | None = None
    title: RequiredStr | None = Field(None, max_length=200)
    url: HttpUrlStr | None = Field(None, max_length=2048)
    thumbnail_url: HttpUrlStr | None = Field(None, max_length=2048)


class PhotoResponse(CamelModel):
    id: int
    album_id: int
    title: str
    url: str
    thumbnail_url: str

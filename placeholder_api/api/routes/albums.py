"""Albums — CRUD plus an album's photos, flat or embedded.

Invariants:
    - DELETE cascades to the album's photos
    - /{id}/photos is [] for unknown albums; /{id}/with-photos is 404
"""

from fastapi import APIRouter, Depends, Response, status

from placeholder_api.api.dependencies import PathId, get_album_service
from placeholder_api.core.errors import ResourceNotFoundError
from placeholder_api.schemas.album import (
    AlbumCreate, AlbumResponse, AlbumUpdate, AlbumWithPhotosResponse,
)
from placeholder_api.schemas.photo import PhotoResponse
from placeholder_api.services.album_service import AlbumService

router = APIRouter(prefix="/api/albums", tags=["albums"])


@router.get("", response_model=list[AlbumResponse])
async def list_albums(service: AlbumService = Depends(get_album_service)):
    return await service.list_all()


@router.get("/{album_id}", response_model=AlbumResponse)
async def get_album(album_id: PathId, service: AlbumService = Depends(get_album_service)):
    album = await service.get_by_id(album_id)
    if album is None:
        raise ResourceNotFoundError("Album", album_id)
    return album


@router.post(
    "", response_model=AlbumResponse, status_code=status.HTTP_201_CREATED,
)
async def create_album(
    body: AlbumCreate,
    response: Response,
    service: AlbumService = Depends(get_album_service),
):
    album = await service.create(body)
    response.headers["Location"] = f"{router.prefix}/{album.id}"
    return album


@router.put("/{album_id}", response_model=AlbumResponse)
async def update_album(
    album_id: PathId, body: AlbumUpdate,
    service: AlbumService = Depends(get_album_service),
):
    album = await service.update(album_id, body)
    if album is None:
        raise ResourceNotFoundError("Album", album_id)
    return album


@router.delete("/{album_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_album(album_id: PathId, service: AlbumService = Depends(get_album_service)):
    if not await service.delete(album_id):
        raise ResourceNotFoundError("Album", album_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{album_id}/photos", response_model=list[PhotoResponse])
async def list_album_photos(
    album_id: PathId, service: AlbumService = Depends(get_album_service),
):
    return await service.list_photos(album_id)


@router.get("/{album_id}/with-photos", response_model=AlbumWithPhotosResponse)
async def get_album_with_photos(
    album_id: PathId, service: AlbumService = Depends(get_album_service),
):
    album = await service.get_with_photos(album_id)
    if album is None:
        raise ResourceNotFoundError("Album", album_id)
    return album

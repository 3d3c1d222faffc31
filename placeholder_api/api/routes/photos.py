"""Photos — CRUD plus filtering by album."""

from fastapi import APIRouter, Depends, Response, status

from placeholder_api.api.dependencies import PathId, get_photo_service
from placeholder_api.core.errors import ResourceNotFoundError
from placeholder_api.schemas.photo import PhotoCreate, PhotoResponse, PhotoUpdate
from placeholder_api.services.photo_service import PhotoService

router = APIRouter(prefix="/api/photos", tags=["photos"])


@router.get("", response_model=list[PhotoResponse])
async def list_photos(service: PhotoService = Depends(get_photo_service)):
    return await service.list_all()


@router.get("/by-album/{album_id}", response_model=list[PhotoResponse])
async def list_photos_by_album(
    album_id: PathId, service: PhotoService = Depends(get_photo_service),
):
    return await service.list_by_album(album_id)


@router.get("/{photo_id}", response_model=PhotoResponse)
async def get_photo(photo_id: PathId, service: PhotoService = Depends(get_photo_service)):
    photo = await service.get_by_id(photo_id)
    if photo is None:
        raise ResourceNotFoundError("Photo", photo_id)
    return photo


@router.post(
    "", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED,
)
async def create_photo(
    body: PhotoCreate,
    response: Response,
    service: PhotoService = Depends(get_photo_service),
):
    photo = await service.create(body)
    response.headers["Location"] = f"{router.prefix}/{photo.id}"
    return photo


@router.put("/{photo_id}", response_model=PhotoResponse)
async def update_photo(
    photo_id: PathId, body: PhotoUpdate,
    service: PhotoService = Depends(get_photo_service),
):
    photo = await service.update(photo_id, body)
    if photo is None:
        raise ResourceNotFoundError("Photo", photo_id)
    return photo


@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(photo_id: PathId, service: PhotoService = Depends(get_photo_service)):
    if not await service.delete(photo_id):
        raise ResourceNotFoundError("Photo", photo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

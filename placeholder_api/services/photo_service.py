"""Photo Service — photos in albums; albumId checked on every write."""

from placeholder_api.core.domain_types import AlbumId, Resource
from placeholder_api.models import Photo
from placeholder_api.services.resource_service import ResourceService


class PhotoService(ResourceService[Photo]):
    model = Photo
    resource = Resource.PHOTOS
    parents = {"album_id": Resource.ALBUMS}

    async def list_by_album(self, album_id: AlbumId) -> list[Photo]:
        return await self.repository.find_all(Photo.album_id == album_id)

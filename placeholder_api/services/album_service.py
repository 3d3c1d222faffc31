"""Album Service — albums owned by users, cascading to photos.

Invariants:
    - userId must reference an existing user on create and on update
    - delete removes the album's photos first
"""

from placeholder_api.core.domain_types import AlbumId, Resource
from placeholder_api.models import Album, Photo
from placeholder_api.schemas.album import AlbumWithPhotosResponse
from placeholder_api.schemas.photo import PhotoResponse
from placeholder_api.services.resource_service import ResourceService


class AlbumService(ResourceService[Album]):
    model = Album
    resource = Resource.ALBUMS
    parents = {"user_id": Resource.USERS}

    async def list_photos(self, album_id: AlbumId) -> list[Photo]:
        return await self.storage.photos.find_all(Photo.album_id == album_id)

    async def get_with_photos(self, album_id: AlbumId) -> AlbumWithPhotosResponse | None:
        album = await self.repository.get(album_id)
        if album is None:
            return None
        photos = await self.list_photos(album_id)
        return AlbumWithPhotosResponse(
            id=album.id, user_id=album.user_id, title=album.title,
            photos=[PhotoResponse.model_validate(p) for p in photos],
        )

    async def _delete_children(self, entity_id: int) -> None:
        await self.storage.photos.delete_where(Photo.album_id == entity_id)

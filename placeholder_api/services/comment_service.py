"""Comment Service — comments on posts; postId checked on every write."""

from placeholder_api.core.domain_types import PostId, Resource
from placeholder_api.models import Comment
from placeholder_api.services.resource_service import ResourceService


class CommentService(ResourceService[Comment]):
    model = Comment
    resource = Resource.COMMENTS
    parents = {"post_id": Resource.POSTS}

    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        return await self.repository.find_all(Comment.post_id == post_id)

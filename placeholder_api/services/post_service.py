"""Post Service — posts owned by users, cascading to comments.

Invariants:
    - userId must reference an existing user on create and on update
    - delete removes the post's comments first
"""

from placeholder_api.core.domain_types import PostId, Resource
from placeholder_api.models import Comment, Post
from placeholder_api.schemas.comment import CommentResponse
from placeholder_api.schemas.post import PostWithCommentsResponse
from placeholder_api.services.resource_service import ResourceService


class PostService(ResourceService[Post]):
    model = Post
    resource = Resource.POSTS
    parents = {"user_id": Resource.USERS}

    async def list_comments(self, post_id: PostId) -> list[Comment]:
        return await self.storage.comments.find_all(Comment.post_id == post_id)

    async def get_with_comments(self, post_id: PostId) -> PostWithCommentsResponse | None:
        post = await self.repository.get(post_id)
        if post is None:
            return None
        comments = await self.list_comments(post_id)
        return PostWithCommentsResponse(
            id=post.id, user_id=post.user_id, title=post.title, body=post.body,
            comments=[CommentResponse.model_validate(c) for c in comments],
        )

    async def _delete_children(self, entity_id: int) -> None:
        await self.storage.comments.delete_where(Comment.post_id == entity_id)

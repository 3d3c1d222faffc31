"""Todo Service — todos owned by users, with completed/pending views.

Invariants:
    - list_completed and list_pending partition list_all (completed is non-nullable)
"""

from placeholder_api.core.domain_types import Resource, UserId
from placeholder_api.models import Todo
from placeholder_api.services.resource_service import ResourceService


class TodoService(ResourceService[Todo]):
    model = Todo
    resource = Resource.TODOS
    parents = {"user_id": Resource.USERS}

    async def list_by_user(self, user_id: UserId) -> list[Todo]:
        return await self.repository.find_all(Todo.user_id == user_id)

    async def list_completed(self) -> list[Todo]:
        return await self.repository.find_all(Todo.completed.is_(True))

    async def list_pending(self) -> list[Todo]:
        return await self.repository.find_all(Todo.completed.is_(False))

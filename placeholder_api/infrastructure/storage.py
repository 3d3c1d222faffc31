"""SQL Storage — SQLAlchemy implementation of the core storage Protocols.

Invariants:
    - One SqlStorage per request, wrapping that request's AsyncSession
    - Repositories flush but never commit; SqlStorage.commit() ends the transaction
    - find_all results are ordered by primary key

Design Decisions:
    - Generic SqlRepository over six hand-written classes: every table has the
      same get/list/add/delete surface
    - delete_where issues a bulk DELETE: used for explicit cascades, where
      loading every child row first buys nothing
"""

import logging
from typing import Any, Generic, TypeVar

from fastapi import Depends
from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from placeholder_api.infrastructure.database import get_db
from placeholder_api.models import Album, Comment, Photo, Post, Todo, User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class SqlRepository(Generic[ModelT]):
    """Table access for one ORM model."""

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model

    async def get(self, entity_id: int) -> ModelT | None:
        return await self.db.get(self.model, entity_id)

    async def find_all(self, *criteria: Any) -> list[ModelT]:
        query = select(self.model).where(*criteria).order_by(self.model.id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def find_first(self, *criteria: Any) -> ModelT | None:
        query = select(self.model).where(*criteria).order_by(self.model.id).limit(1)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def exists(self, entity_id: int) -> bool:
        result = await self.db.execute(
            select(exists().where(self.model.id == entity_id)),
        )
        return bool(result.scalar())

    async def add(self, entity: ModelT) -> ModelT:
        """Insert and flush so the generated id is available."""
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.db.delete(entity)
        await self.db.flush()

    async def delete_where(self, *criteria: Any) -> int:
        """Bulk delete matching rows; returns the number removed."""
        result = await self.db.execute(
            delete(self.model)
            .where(*criteria)
            .execution_options(synchronize_session="fetch"),
        )
        return result.rowcount or 0


class SqlStorage:
    """Unit of work over all six tables for one request."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users: SqlRepository[User] = SqlRepository(db, User)
        self.posts: SqlRepository[Post] = SqlRepository(db, Post)
        self.comments: SqlRepository[Comment] = SqlRepository(db, Comment)
        self.albums: SqlRepository[Album] = SqlRepository(db, Album)
        self.photos: SqlRepository[Photo] = SqlRepository(db, Photo)
        self.todos: SqlRepository[Todo] = SqlRepository(db, Todo)

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()


async def get_storage(db: AsyncSession = Depends(get_db)) -> SqlStorage:
    """FastAPI dependency — request-scoped storage over the request session."""
    return SqlStorage(db)

"""Boundary Protocols — contracts between services and storage.

Invariants:
    - Services only reach persistence through these Protocol types
    - One EntityRepository per resource; Storage groups them with one transaction
    - Implementations provided by infrastructure/storage.py via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; callers await each step and
      commit once at the end of the operation
"""

from typing import Any, Protocol, TypeVar

ModelT = TypeVar("ModelT")


class EntityRepository(Protocol[ModelT]):
    """Contract for one entity table."""
    async def get(self, entity_id: int) -> ModelT | None: ...
    async def find_all(self, *criteria: Any) -> list[ModelT]: ...
    async def exists(self, entity_id: int) -> bool: ...
    async def find_first(self, *criteria: Any) -> ModelT | None: ...
    async def add(self, entity: ModelT) -> ModelT: ...
    async def delete(self, entity: ModelT) -> None: ...
    async def delete_where(self, *criteria: Any) -> int: ...


class Storage(Protocol):
    """Contract for the per-request unit of work over all six tables."""
    users: EntityRepository
    posts: EntityRepository
    comments: EntityRepository
    albums: EntityRepository
    photos: EntityRepository
    todos: EntityRepository

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...

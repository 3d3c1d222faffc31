"""Resource Service Base — the shared get/list/create/update/delete flow.

Invariants:
    - Absence is not an error: get_by_id/update return None, delete returns False
    - Every supplied parent FK is checked for existence before anything is written
      (ReferenceNotFoundError otherwise, nothing persisted)
    - update writes only the fields the client supplied
    - delete removes children first (_delete_children), then the row, then commits once
    - A write the database refuses (unique key or FK taken by a concurrent request)
      is rolled back and re-checked, so it surfaces as DuplicateKeyError or
      ReferenceNotFoundError rather than a database failure

Design Decisions:
    - Subclasses declare `model`, `resource` and `parents` instead of
      re-implementing six identical CRUD classes
    - Services log writes at INFO with resource/resource_id extras; failures are
      logged once by the global error handlers
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError

from placeholder_api.core.domain_types import Resource
from placeholder_api.core.errors import ErrorContext, ReferenceNotFoundError
from placeholder_api.core.repository_protocols import EntityRepository, Storage
from placeholder_api.schemas.base import CamelModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class ResourceService(Generic[ModelT]):
    """CRUD over one resource; subclasses add relationship accessors."""

    model: ClassVar[type]
    resource: ClassVar[Resource]
    # FK attribute -> parent resource it must reference
    parents: ClassVar[dict[str, Resource]] = {}

    def __init__(self, storage: Storage):
        self.storage = storage

    @property
    def repository(self) -> EntityRepository:
        return self._repository_for(self.resource)

    def _repository_for(self, resource: Resource) -> EntityRepository:
        return getattr(self.storage, resource.value)

    async def list_all(self) -> list[ModelT]:
        return await self.repository.find_all()

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        return await self.repository.get(entity_id)

    async def create(self, data: CamelModel) -> ModelT:
        fields = self._to_columns(data.model_dump())
        await self._check_references(fields)
        await self._check_unique(fields)
        try:
            entity = await self.repository.add(self.model(**fields))
            await self.storage.commit()
        except IntegrityError:
            await self._recheck_after_conflict(fields)
            raise
        self._log_write("Created", entity.id)
        return entity

    async def update(self, entity_id: int, data: CamelModel) -> ModelT | None:
        entity = await self.repository.get(entity_id)
        if entity is None:
            return None
        fields = self._to_columns(data.supplied_fields())
        await self._check_references(fields)
        await self._check_unique(fields, exclude_id=entity_id)
        for column, value in fields.items():
            setattr(entity, column, value)
        try:
            await self.storage.commit()
        except IntegrityError:
            await self._recheck_after_conflict(fields, exclude_id=entity_id)
            raise
        self._log_write("Updated", entity_id)
        return entity

    async def delete(self, entity_id: int) -> bool:
        entity = await self.repository.get(entity_id)
        if entity is None:
            return False
        await self._delete_children(entity_id)
        await self.repository.delete(entity)
        await self.storage.commit()
        self._log_write("Deleted", entity_id)
        return True

    # --- Hooks -----------------------------------------------------------------

    def _to_columns(self, data: dict[str, Any]) -> dict[str, Any]:
        """Map schema fields to model columns (identity for flat resources)."""
        return data

    async def _check_unique(
        self, fields: dict[str, Any], exclude_id: int | None = None,
    ) -> None:
        """Raise DuplicateKeyError on unique conflicts. No unique keys by default."""

    async def _delete_children(self, entity_id: int) -> None:
        """Remove dependent rows before the parent. No children by default."""

    # --- Helpers ---------------------------------------------------------------

    async def _check_references(self, fields: dict[str, Any]) -> None:
        for column, parent in self.parents.items():
            if column not in fields:
                continue
            parent_id = fields[column]
            if not await self._repository_for(parent).exists(parent_id):
                logger.warning(
                    f"{self.resource.label} write rejected: {parent.label} {parent_id} not found",
                    extra={"resource": self.resource.value, "error_code": "REFERENCE_NOT_FOUND"},
                )
                raise ReferenceNotFoundError(
                    parent.label, parent_id, to_camel(column),
                    ErrorContext(resource=self.resource.value),
                )

    async def _recheck_after_conflict(
        self, fields: dict[str, Any], exclude_id: int | None = None,
    ) -> None:
        """Roll back a write the database refused, then name the conflict.

        A concurrent request can take a unique key or delete a parent between
        the pre-checks and the flush. Once rolled back, the same checks see the
        winner's committed state and raise the domain error; if they pass,
        the caller re-raises the IntegrityError.
        """
        await self.storage.rollback()
        logger.warning(
            f"{self.resource.label} write hit a constraint after pre-checks passed",
            extra={"resource": self.resource.value, "resource_id": exclude_id},
        )
        await self._check_references(fields)
        await self._check_unique(fields, exclude_id=exclude_id)

    def _log_write(self, action: str, entity_id: int) -> None:
        logger.info(
            f"{action} {self.resource.label.lower()} with id {entity_id}",
            extra={"resource": self.resource.value, "resource_id": entity_id},
        )

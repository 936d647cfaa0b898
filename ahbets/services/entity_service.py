"""EntityService — generic persistence choke point and partial-update merge."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from ahbets.dao.base import BaseDAO, ModelT

log = structlog.get_logger("ahbets.service")


class EntityService(Generic[ModelT]):
    """Stateless service wrapping one entity DAO.

    Subclasses set ``entity_name`` and ``patch_fields``. ``patch_fields``
    lists the attributes a partial update may overwrite; the identifier is
    never among them. Override :meth:`merge` for anything fancier than a
    field-by-field overwrite.
    """

    entity_name: str
    patch_fields: tuple[str, ...] = ()

    def __init__(self, dao: BaseDAO[ModelT]) -> None:
        self._dao = dao

    async def save(self, session: AsyncSession, entity: ModelT) -> ModelT:
        """Persist a new (or overwritten) entity and return the stored form."""
        log.debug(f"{self.entity_name}.save_requested", entity=repr(entity))
        return await self._dao.save(session, entity)

    async def update(self, session: AsyncSession, entity: ModelT) -> ModelT:
        """Full replace. The caller has already checked that the ID exists."""
        log.debug(f"{self.entity_name}.update_requested", entity=repr(entity))
        return await self._dao.save(session, entity)

    async def partial_update(
        self, session: AsyncSession, patch: Mapping[str, Any]
    ) -> ModelT | None:
        """Merge the non-null fields of *patch* into the stored entity.

        *patch* must carry the target's ``id``. Returns the merged entity, or
        None if no row has that ID.
        """
        log.debug(f"{self.entity_name}.partial_update_requested", patch=dict(patch))
        existing = await self._dao.get_by_id(session, patch["id"])
        if existing is None:
            return None
        self.merge(existing, patch)
        return await self._dao.save(session, existing)

    def merge(self, existing: ModelT, patch: Mapping[str, Any]) -> ModelT:
        """Overwrite each patchable field whose patch value is present and not None.

        Collection or reference values are assigned as-is, never deep-merged.
        """
        for field in self.patch_fields:
            value = patch.get(field)
            if value is not None:
                setattr(existing, field, value)
        return existing

    async def find_all(self, session: AsyncSession) -> list[ModelT]:
        log.debug(f"{self.entity_name}.list_requested")
        return await self._dao.list_all(session)

    async def find_one(self, session: AsyncSession, entity_id: Any) -> ModelT | None:
        log.debug(f"{self.entity_name}.get_requested", entity_id=entity_id)
        return await self._dao.get_by_id(session, entity_id)

    async def delete(self, session: AsyncSession, entity_id: Any) -> None:
        """Delete by ID. A missing row is not an error."""
        log.debug(f"{self.entity_name}.delete_requested", entity_id=entity_id)
        await self._dao.delete(session, entity_id)

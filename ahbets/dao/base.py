"""Generic base DAO — the persistence contract every entity store satisfies."""

from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy import exists as sa_exists
from sqlalchemy.ext.asyncio import AsyncSession

from ahbets.core.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseDAO(Generic[ModelT]):
    """Base data-access object. Subclasses set ``model`` class attribute.

    The model must have a single-column primary key. All writes only
    ``flush``; committing is the job of the surrounding transaction scope.
    """

    model: type[ModelT]

    @staticmethod
    def _require_pk(pk: Any) -> None:
        """Raise ValueError if *pk* is None."""
        if pk is None:
            raise ValueError("pk must not be None")

    @classmethod
    def pk_column(cls) -> ColumnElement:
        return cls.model.__mapper__.primary_key[0]

    @classmethod
    def identity_of(cls, obj: ModelT) -> Any:
        """Return the primary-key value of *obj*, or None while it is unsaved."""
        prop = cls.model.__mapper__.get_property_by_column(cls.pk_column())
        return getattr(obj, prop.key)

    async def get_by_id(self, session: AsyncSession, pk: Any) -> ModelT | None:
        self._require_pk(pk)
        return await session.get(self.model, pk)

    async def list_all(self, session: AsyncSession) -> list[ModelT]:
        """Return every row in primary-key order (no filtering, no paging)."""
        result = await session.execute(select(self.model).order_by(self.pk_column()))
        return list(result.scalars().all())

    async def save(self, session: AsyncSession, obj: ModelT) -> ModelT:
        """Insert *obj* or overwrite the row with the same primary key.

        A missing primary key is assigned by the database. A present one is
        merged into the session: the stored row is overwritten if it exists,
        inserted with that key otherwise.
        """
        if self.identity_of(obj) is None:
            session.add(obj)
        else:
            obj = await session.merge(obj)
        await session.flush()
        await session.refresh(obj)
        return obj

    async def delete(self, session: AsyncSession, pk: Any) -> bool:
        """Delete by primary key. Returns False when nothing was there."""
        self._require_pk(pk)
        obj = await session.get(self.model, pk)
        if obj is None:
            return False
        await session.delete(obj)
        await session.flush()
        return True

    async def exists(self, session: AsyncSession, pk: Any) -> bool:
        """Check existence without loading the full ORM object."""
        self._require_pk(pk)
        stmt = select(sa_exists().where(self.pk_column() == pk))
        result = await session.execute(stmt)
        return result.scalar_one()


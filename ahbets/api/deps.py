"""Dependency injection — session, DAO and service singletons."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from ahbets.core.database import Base
from ahbets.dao.department_dao import DepartmentDAO
from ahbets.dao.hospital_dao import HospitalDAO
from ahbets.services.department_service import DepartmentService
from ahbets.services.hospital_service import HospitalService

DEFAULT_DATABASE_URL = "postgresql+asyncpg://ahbets@localhost:5432/ahbets"

# ---------------------------------------------------------------------------
# DAO singletons
# ---------------------------------------------------------------------------
_hospital_dao = HospitalDAO()
_department_dao = DepartmentDAO()

# ---------------------------------------------------------------------------
# Service singletons
# ---------------------------------------------------------------------------
_hospital_service = HospitalService(_hospital_dao)
_department_service = DepartmentService(_department_dao)

# ---------------------------------------------------------------------------
# Engine / session factory (initialised by app lifespan)
# ---------------------------------------------------------------------------
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_session_factory(database_url: str | None = None) -> async_sessionmaker[AsyncSession]:
    """Create the async engine and session factory. Called once at startup."""
    global _engine, _session_factory  # noqa: PLW0603
    url = database_url or os.environ.get("AHBETS_DATABASE_URL", DEFAULT_DATABASE_URL)
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        _engine = create_async_engine(url, poolclass=NullPool)
        event.listen(_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        _engine = create_async_engine(
            url,
            pool_pre_ping=True,
            pool_size=10,
            max_overflow=20,
            pool_recycle=1800,
        )
    _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _session_factory


async def create_schema() -> None:
    """Create any missing tables. Stand-in for a migration tool in dev setups."""
    if _engine is None:
        raise RuntimeError("call init_session_factory() before create_schema()")
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose the async engine, closing all pooled connections."""
    global _engine  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None


def set_session_factory(factory: async_sessionmaker[AsyncSession] | None) -> None:
    """Override session factory (for testing)."""
    global _session_factory  # noqa: PLW0603
    _session_factory = factory


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a per-request session inside one transaction.

    The transaction commits when the request finishes normally and rolls
    back if anything raises, including the ``ServiceError`` family.
    """
    if _session_factory is None:
        raise RuntimeError("call init_session_factory() before handling requests")
    async with _session_factory() as session:
        async with session.begin():
            yield session


# ---------------------------------------------------------------------------
# DAO / service getters (for Depends())
# ---------------------------------------------------------------------------


def get_hospital_dao() -> HospitalDAO:
    return _hospital_dao


def get_department_dao() -> DepartmentDAO:
    return _department_dao


def get_hospital_service() -> HospitalService:
    return _hospital_service


def get_department_service() -> DepartmentService:
    return _department_service

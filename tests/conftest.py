"""Shared fixtures for ahbets tests.

Store-backed tests run against in-memory SQLite through aiosqlite; every
test gets a fresh database. Override with ``TEST_DATABASE_URL`` to point the
same tests at PostgreSQL.
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import ahbets.models  # noqa: F401  (registers tables on Base.metadata)
from ahbets.core.database import Base

DEFAULT_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="session")
def db_url():
    return os.environ.get("TEST_DATABASE_URL", DEFAULT_DB_URL)


@pytest_asyncio.fixture
async def engine(db_url):
    """Fresh engine with all tables created; dropped again afterwards."""
    if db_url.startswith("sqlite"):
        eng = create_async_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        @event.listens_for(eng.sync_engine, "connect")
        def _fk_pragma(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    else:
        eng = create_async_engine(db_url)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    """Provide a transactional session that rolls back after each test."""
    async with session_factory() as sess:
        async with sess.begin():
            yield sess
            await sess.rollback()


@pytest.fixture
def app():
    """Bare app: routers and error handlers, no lifespan, no database."""
    from fastapi import FastAPI

    from ahbets.api.errors import register_error_handlers
    from ahbets.api.routers import departments, hospitals

    application = FastAPI()
    register_error_handlers(application)
    application.include_router(hospitals.router, prefix=hospitals.resource.prefix)
    application.include_router(departments.router, prefix=departments.resource.prefix)
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

"""ahbets REST API — FastAPI application factory."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ahbets.api import alerts
from ahbets.api.deps import create_schema, dispose_engine, init_session_factory
from ahbets.api.errors import register_error_handlers
from ahbets.api.middleware.request_id import RequestIDMiddleware
from ahbets.api.routers import departments, hospitals
from ahbets.core.logging import setup_logging

log = structlog.get_logger("ahbets.api")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: init DB (and schema if asked). Shutdown: dispose engine."""
    init_session_factory()
    if os.environ.get("AHBETS_AUTO_CREATE_SCHEMA", "1") == "1":
        await create_schema()
        log.info("startup.schema_ready")
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title="ahbets",
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=_lifespan,
    )

    register_error_handlers(app)

    cors_origins = os.environ.get("AHBETS_CORS_ORIGINS", "http://localhost:9000")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cors_origins.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Request-ID", *alerts.header_names()],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(hospitals.router, prefix=hospitals.resource.prefix, tags=["hospitals"])
    app.include_router(
        departments.router, prefix=departments.resource.prefix, tags=["departments"]
    )

    return app

"""Unified error handling — ServiceError + RequestValidationError → JSON."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ahbets.api import alerts
from ahbets.services import BadRequestAlertError, NotFoundError, ServiceError

log = structlog.get_logger("ahbets.api")

_STATUS_MAP: dict[type[ServiceError], int] = {
    NotFoundError: 404,
}


async def _service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    status = 500
    for cls in type(exc).__mro__:
        if cls in _STATUS_MAP:
            status = _STATUS_MAP[cls]
            break
    return JSONResponse(status_code=status, content={"detail": str(exc)})


async def _bad_request_alert_handler(
    _request: Request, exc: BadRequestAlertError
) -> JSONResponse:
    log.info("request.rejected", entity=exc.entity_name, error_key=exc.error_key)
    return JSONResponse(
        status_code=400,
        content={
            "detail": str(exc),
            "entity_name": exc.entity_name,
            "error_key": exc.error_key,
            "message": f"error.{exc.error_key}",
        },
        headers=alerts.failure(exc.entity_name, exc.error_key),
    )


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return JSONResponse(status_code=422, content={"detail": "; ".join(messages)})


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(ServiceError, _service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(BadRequestAlertError, _bad_request_alert_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]

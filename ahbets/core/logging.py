"""Structured logging — structlog rendered through stdlib logging handlers."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "aiosqlite", "uvicorn.access")


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and stdlib logging for the whole process.

    Explicit arguments win over the environment:
        AHBETS_LOG_LEVEL  — level for the ``ahbets`` loggers (default: INFO)
        AHBETS_LOG_FORMAT — console | json (default: console)

    uvicorn's access log and the database drivers are kept at WARNING;
    request logging is done by :class:`RequestIDMiddleware` instead.
    """
    log_level = (level or os.environ.get("AHBETS_LOG_LEVEL", "INFO")).upper()
    fmt = (log_format or os.environ.get("AHBETS_LOG_FORMAT", "console")).lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers: dict[str, dict] = {
        "ahbets": {"level": log_level},
        "uvicorn.error": {"level": "INFO"},
    }
    loggers.update({name: {"level": "WARNING"} for name in _QUIET_LOGGERS})

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(fmt),
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["default"], "level": log_level},
            "loggers": loggers,
        }
    )

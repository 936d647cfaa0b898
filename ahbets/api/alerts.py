"""Alert headers attached to mutation responses.

Clients read ``X-<app>-alert`` (or ``X-<app>-error``) as a translation key and
``X-<app>-params`` as its argument, e.g.::

    X-ahbetsApp-alert: ahbetsApp.hospital.created
    X-ahbetsApp-params: 7
"""

from __future__ import annotations

import os
from urllib.parse import quote


def application_name() -> str:
    return os.environ.get("AHBETS_APP_NAME", "ahbetsApp")


def alert_headers(message: str, param: str) -> dict[str, str]:
    app = application_name()
    return {f"X-{app}-alert": message, f"X-{app}-params": quote(param)}


def entity_created(entity_name: str, entity_id: object) -> dict[str, str]:
    return alert_headers(f"{application_name()}.{entity_name}.created", str(entity_id))


def entity_updated(entity_name: str, entity_id: object) -> dict[str, str]:
    return alert_headers(f"{application_name()}.{entity_name}.updated", str(entity_id))


def entity_deleted(entity_name: str, entity_id: object) -> dict[str, str]:
    return alert_headers(f"{application_name()}.{entity_name}.deleted", str(entity_id))


def failure(entity_name: str, error_key: str) -> dict[str, str]:
    app = application_name()
    return {f"X-{app}-error": f"error.{error_key}", f"X-{app}-params": entity_name}


def header_names() -> list[str]:
    """Every alert header name, for CORS ``expose_headers``."""
    app = application_name()
    return [f"X-{app}-alert", f"X-{app}-error", f"X-{app}-params"]

"""EntityResource — generic REST controller for one entity type.

Each resource validates the identifier contract before a mutation reaches
its service, then maps the outcome onto a status code and alert headers.
Routes are registered explicitly from :meth:`EntityResource.routes`.

This module deliberately has no ``from __future__ import annotations``:
FastAPI reads the endpoint annotations at registration time and the body
types are closure variables, so they must be evaluated eagerly.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic

import structlog
from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ahbets.api import alerts
from ahbets.api.deps import get_session
from ahbets.api.schemas.common import PathId
from ahbets.dao.base import BaseDAO, ModelT
from ahbets.services import (
    EntityNotFoundError,
    IdentifierExistsError,
    IdentifierMismatchError,
    InvalidIdentifierError,
    NotFoundError,
    NotFoundOnMergeError,
)
from ahbets.services.entity_service import EntityService

log = structlog.get_logger("ahbets.api")

API_PREFIX = "/api"


def reject_client_ids() -> bool:
    """Whether create refuses a body that already carries an ID."""
    return os.environ.get("AHBETS_REJECT_CLIENT_ID", "0") == "1"


@dataclass(frozen=True)
class Route:
    """One row of a resource's route table."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int
    response_model: Any = None


class EntityResource(Generic[ModelT]):
    """HTTP boundary for one entity: ``/api/{plural}`` and ``/api/{plural}/{id}``."""

    def __init__(
        self,
        *,
        entity_name: str,
        plural: str,
        model: type[ModelT],
        request_schema: type[BaseModel],
        patch_schema: type[BaseModel],
        response_schema: type[BaseModel],
        get_service: Callable[[], EntityService[ModelT]],
        get_dao: Callable[[], BaseDAO[ModelT]],
    ) -> None:
        self.entity_name = entity_name
        self.plural = plural
        self.model = model
        self.request_schema = request_schema
        self.patch_schema = patch_schema
        self.response_schema = response_schema
        self.get_service = get_service
        self.get_dao = get_dao

    @property
    def prefix(self) -> str:
        return f"{API_PREFIX}/{self.plural}"

    def location(self, entity_id: Any) -> str:
        return f"{self.prefix}/{entity_id}"

    # ── validation ───────────────────────────────────────────────────────

    def check_new(self, body_id: Any) -> None:
        """Create-time ID policy. Client IDs are accepted unless configured otherwise."""
        if body_id is not None and reject_client_ids():
            raise IdentifierExistsError(
                f"A new {self.entity_name} cannot already have an ID", self.entity_name
            )

    def check_identifier(self, path_id: Any, body_id: Any) -> None:
        """Body must carry an ID and it must equal the path ID."""
        if body_id is None:
            raise InvalidIdentifierError("Invalid id", self.entity_name)
        if path_id != body_id:
            raise IdentifierMismatchError("Invalid ID", self.entity_name)

    async def ensure_exists(
        self, session: AsyncSession, dao: BaseDAO[ModelT], entity_id: Any
    ) -> None:
        if not await dao.exists(session, entity_id):
            raise EntityNotFoundError("Entity not found", self.entity_name)

    def to_response(self, entity: ModelT) -> BaseModel:
        return self.response_schema.model_validate(entity)

    # ── route table ──────────────────────────────────────────────────────

    def routes(self) -> list[Route]:
        many = list[self.response_schema]
        return [
            Route("POST", "", self._create_endpoint(), 201, self.response_schema),
            Route("PUT", "/{entity_id}", self._update_endpoint(), 200, self.response_schema),
            Route(
                "PATCH", "/{entity_id}", self._partial_update_endpoint(), 200, self.response_schema
            ),
            Route("GET", "", self._list_endpoint(), 200, many),
            Route("GET", "/{entity_id}", self._get_endpoint(), 200, self.response_schema),
            Route("DELETE", "/{entity_id}", self._delete_endpoint(), 204),
        ]

    def build_router(self) -> APIRouter:
        router = APIRouter()
        for route in self.routes():
            router.add_api_route(
                route.path,
                route.endpoint,
                methods=[route.method],
                status_code=route.status_code,
                response_model=route.response_model,
                name=f"{route.endpoint.__name__}_{self.entity_name}",
            )
        return router

    # ── endpoints ────────────────────────────────────────────────────────

    def _create_endpoint(self) -> Callable[..., Any]:
        resource = self
        body_type = self.request_schema

        async def create(
            body: body_type,  # type: ignore[valid-type]
            response: Response,
            session: AsyncSession = Depends(get_session),
            svc: EntityService = Depends(self.get_service),
        ):
            log.debug("rest.create_requested", entity=resource.entity_name, body=body.model_dump())
            resource.check_new(body.id)
            result = await svc.save(session, resource.model(**body.model_dump()))
            response.headers["Location"] = resource.location(result.id)
            response.headers.update(alerts.entity_created(resource.entity_name, result.id))
            return resource.to_response(result)

        return create

    def _update_endpoint(self) -> Callable[..., Any]:
        resource = self
        body_type = self.request_schema

        async def update(
            entity_id: PathId,
            body: body_type,  # type: ignore[valid-type]
            response: Response,
            session: AsyncSession = Depends(get_session),
            svc: EntityService = Depends(self.get_service),
            dao: BaseDAO = Depends(self.get_dao),
        ):
            log.debug(
                "rest.update_requested",
                entity=resource.entity_name,
                entity_id=entity_id,
                body=body.model_dump(),
            )
            resource.check_identifier(entity_id, body.id)
            await resource.ensure_exists(session, dao, entity_id)
            result = await svc.update(session, resource.model(**body.model_dump()))
            response.headers.update(alerts.entity_updated(resource.entity_name, body.id))
            return resource.to_response(result)

        return update

    def _partial_update_endpoint(self) -> Callable[..., Any]:
        resource = self
        body_type = self.patch_schema

        async def partial_update(
            entity_id: PathId,
            body: body_type,  # type: ignore[valid-type]
            response: Response,
            session: AsyncSession = Depends(get_session),
            svc: EntityService = Depends(self.get_service),
            dao: BaseDAO = Depends(self.get_dao),
        ):
            patch = body.model_dump(exclude_unset=True)
            log.debug(
                "rest.partial_update_requested",
                entity=resource.entity_name,
                entity_id=entity_id,
                patch=patch,
            )
            resource.check_identifier(entity_id, body.id)
            await resource.ensure_exists(session, dao, entity_id)
            result = await svc.partial_update(session, patch)
            if result is None:
                raise NotFoundOnMergeError(f"{resource.entity_name} not found")
            response.headers.update(alerts.entity_updated(resource.entity_name, body.id))
            return resource.to_response(result)

        return partial_update

    def _list_endpoint(self) -> Callable[..., Any]:
        resource = self

        async def list_all(
            session: AsyncSession = Depends(get_session),
            svc: EntityService = Depends(self.get_service),
        ):
            log.debug("rest.list_requested", entity=resource.entity_name)
            return [resource.to_response(e) for e in await svc.find_all(session)]

        return list_all

    def _get_endpoint(self) -> Callable[..., Any]:
        resource = self

        async def get_one(
            entity_id: PathId,
            session: AsyncSession = Depends(get_session),
            svc: EntityService = Depends(self.get_service),
        ):
            log.debug("rest.get_requested", entity=resource.entity_name, entity_id=entity_id)
            entity = await svc.find_one(session, entity_id)
            if entity is None:
                raise NotFoundError(f"{resource.entity_name} not found")
            return resource.to_response(entity)

        return get_one

    def _delete_endpoint(self) -> Callable[..., Any]:
        resource = self

        async def delete(
            entity_id: PathId,
            session: AsyncSession = Depends(get_session),
            svc: EntityService = Depends(self.get_service),
        ) -> Response:
            log.debug("rest.delete_requested", entity=resource.entity_name, entity_id=entity_id)
            await svc.delete(session, entity_id)
            return Response(
                status_code=204,
                headers=alerts.entity_deleted(resource.entity_name, entity_id),
            )

        return delete

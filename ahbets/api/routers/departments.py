"""Departments router."""

from __future__ import annotations

from ahbets.api.deps import get_department_dao, get_department_service
from ahbets.api.resource import EntityResource
from ahbets.api.schemas.department import DepartmentPatch, DepartmentRequest, DepartmentResponse
from ahbets.models.department import Department

resource = EntityResource[Department](
    entity_name="department",
    plural="departments",
    model=Department,
    request_schema=DepartmentRequest,
    patch_schema=DepartmentPatch,
    response_schema=DepartmentResponse,
    get_service=get_department_service,
    get_dao=get_department_dao,
)

router = resource.build_router()

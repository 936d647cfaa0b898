"""DepartmentService — department records and their hospital reference."""

from __future__ import annotations

from ahbets.models.department import Department
from ahbets.services.entity_service import EntityService


class DepartmentService(EntityService[Department]):
    entity_name = "department"
    patch_fields = ("dep_name", "available", "released", "assigned", "hospital_id")

"""HospitalService — hospital records."""

from __future__ import annotations

from ahbets.models.hospital import Hospital
from ahbets.services.entity_service import EntityService


class HospitalService(EntityService[Hospital]):
    entity_name = "hospital"
    patch_fields = ("name", "address", "city", "phone", "bed_capacity")

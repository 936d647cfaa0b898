"""Hospitals router."""

from __future__ import annotations

from ahbets.api.deps import get_hospital_dao, get_hospital_service
from ahbets.api.resource import EntityResource
from ahbets.api.schemas.hospital import HospitalPatch, HospitalRequest, HospitalResponse
from ahbets.models.hospital import Hospital

resource = EntityResource[Hospital](
    entity_name="hospital",
    plural="hospitals",
    model=Hospital,
    request_schema=HospitalRequest,
    patch_schema=HospitalPatch,
    response_schema=HospitalResponse,
    get_service=get_hospital_service,
    get_dao=get_hospital_dao,
)

router = resource.build_router()

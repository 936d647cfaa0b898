"""Hospital request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ahbets.api.schemas.common import BodyId


class HospitalRequest(BaseModel):
    """Body of POST and PUT. PUT replaces every mutable field."""

    id: BodyId | None = None
    name: str = Field(min_length=1)
    address: str | None = None
    city: str | None = None
    phone: str | None = None
    bed_capacity: int | None = Field(default=None, ge=0)


class HospitalPatch(BaseModel):
    """Body of PATCH. Omitted or null fields keep their stored value."""

    id: BodyId | None = None
    name: str | None = Field(default=None, min_length=1)
    address: str | None = None
    city: str | None = None
    phone: str | None = None
    bed_capacity: int | None = Field(default=None, ge=0)


class HospitalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str | None
    city: str | None
    phone: str | None
    bed_capacity: int | None

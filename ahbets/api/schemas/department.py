"""Department request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ahbets.api.schemas.common import BodyId


class DepartmentRequest(BaseModel):
    id: BodyId | None = None
    dep_name: str = Field(min_length=1)
    available: int | None = None
    released: int | None = None
    assigned: int | None = None
    hospital_id: BodyId | None = None


class DepartmentPatch(BaseModel):
    id: BodyId | None = None
    dep_name: str | None = Field(default=None, min_length=1)
    available: int | None = None
    released: int | None = None
    assigned: int | None = None
    hospital_id: BodyId | None = None


class DepartmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    dep_name: str
    available: int | None
    released: int | None
    assigned: int | None
    hospital_id: int | None

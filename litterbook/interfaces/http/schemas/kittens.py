from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from litterbook.interfaces.http.schemas.base import CamelModel, CamelResponse, log_as_list


class KittenPayload(CamelModel):
    """One kitten in a full-roster save; omit `id` for a new kitten."""

    id: UUID | None = None
    name: str | None = None
    gender: str | None = None
    color: str | None = None
    ems_code: str | None = None
    status: str = "available"
    reserved_by: str | None = None
    notes: str | None = None
    birth_weight: float | None = None
    complication_type: str | None = None


class RosterReplace(CamelModel):
    kittens: list[KittenPayload]


class KittenUpdate(CamelModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    gender: str | None = None
    color: str | None = None
    ems_code: str | None = None
    status: str | None = None
    reserved_by: str | None = None
    notes: str | None = None
    birth_weight: float | None = None
    complication_type: str | None = None


class BirthWeightsUpdate(CamelModel):
    weights: dict[UUID, float | None]


class DailyWeightsUpdate(CamelModel):
    date: DtDate
    weights: dict[UUID, float]


class WeightEntryResponse(CamelResponse):
    id: UUID
    date: DtDate
    weight: float


class KittenResponse(CamelResponse):
    id: UUID
    litter_id: UUID
    name: str | None
    gender: str | None
    color: str | None
    ems_code: str | None
    status: str
    reserved_by: str | None
    notes: str | None
    birth_weight: float | None
    complication_type: str | None = None
    weight_log: list[WeightEntryResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("weight_log", mode="before")
    @classmethod
    def unwrap_log(cls, value):
        return log_as_list(value)

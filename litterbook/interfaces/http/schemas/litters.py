from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from litterbook.interfaces.http.schemas.base import CamelModel, CamelResponse, log_as_list


class LitterCreate(CamelModel):
    name: str
    mother_id: UUID | None = None
    father_id: UUID | None = None
    external_father_name: str | None = None
    external_father_pedigree_url: str | None = None
    reasoning: str | None = None
    inbreeding_coefficient: float | None = None
    blood_type_notes: str | None = None
    alternative_combinations: str | None = None
    notes: str | None = None


class LitterUpdate(CamelModel):
    """Only the keys present in the request body are written."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    mother_id: UUID | None = None
    father_id: UUID | None = None
    external_father_name: str | None = None
    external_father_pedigree_url: str | None = None
    mating_date_from: DtDate | None = None
    mating_date_to: DtDate | None = None
    expected_date: DtDate | None = None
    birth_date: DtDate | None = None
    completion_date: DtDate | None = None
    reasoning: str | None = None
    inbreeding_coefficient: float | None = None
    blood_type_notes: str | None = None
    alternative_combinations: str | None = None
    mating_notes: str | None = None
    pregnancy_notes: str | None = None
    kitten_count: int | None = None
    birth_notes: str | None = None
    nrr_registered: bool | None = None
    evaluation: str | None = None
    buyers_info: str | None = None
    notes: str | None = None


class PhaseUpdate(CamelModel):
    phase: str


class MatingDatesUpdate(CamelModel):
    date_from: DtDate | None = None
    date_to: DtDate | None = None
    expected_date: DtDate | None = None


class PregnancyNoteCreate(CamelModel):
    date: DtDate
    note: str


class MotherWeightCreate(CamelModel):
    date: DtDate
    weight: float
    notes: str | None = None


class PregnancyNoteResponse(CamelResponse):
    id: UUID
    date: DtDate
    note: str


class MotherWeightResponse(CamelResponse):
    id: UUID
    date: DtDate
    weight: float
    notes: str | None = None


class LitterResponse(CamelResponse):
    id: UUID
    name: str
    phase: str
    mother_id: UUID | None
    father_id: UUID | None
    external_father_name: str | None
    external_father_pedigree_url: str | None
    mating_date_from: DtDate | None
    mating_date_to: DtDate | None
    mating_date: DtDate | None
    expected_date: DtDate | None
    birth_date: DtDate | None
    completion_date: DtDate | None
    reasoning: str | None
    inbreeding_coefficient: float | None
    blood_type_notes: str | None
    alternative_combinations: str | None
    mating_notes: str | None
    pregnancy_notes: str | None
    pregnancy_notes_log: list[PregnancyNoteResponse] = Field(default_factory=list)
    mother_weight_log: list[MotherWeightResponse] = Field(default_factory=list)
    kitten_count: int | None
    birth_notes: str | None
    nrr_registered: bool
    evaluation: str | None
    buyers_info: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
    version: int

    @field_validator("pregnancy_notes_log", "mother_weight_log", mode="before")
    @classmethod
    def unwrap_log(cls, value):
        return log_as_list(value)

    @field_validator("phase", mode="before")
    @classmethod
    def phase_value(cls, value):
        return getattr(value, "value", value)


class GroupedLittersResponse(CamelResponse):
    planned: list[LitterResponse]
    pending: list[LitterResponse]
    active: list[LitterResponse]
    completed: list[LitterResponse]
    all: list[LitterResponse]


class PhaseIssueResponse(CamelResponse):
    code: str
    message: str


class ConsistencyResponse(CamelModel):
    phase: str
    issues: list[PhaseIssueResponse]


class ApplicableFieldsResponse(CamelModel):
    phase: str
    description: str
    fields: list[str]


class WeekMarkerResponse(CamelResponse):
    week: int
    day: int
    date: DtDate
    is_past: bool
    is_current: bool


class PregnancyProgressResponse(CamelResponse):
    mating_date: DtDate
    expected_date: DtDate
    days_pregnant: int
    days_until_birth: int
    progress_percentage: float
    weeks: list[WeekMarkerResponse]
    birth_date: DtDate | None = None
    actual_gestation_days: int | None = None


class DeadlineResponse(CamelModel):
    key: str
    task: str
    type: str
    category: str
    days_after_birth: int
    due_on: DtDate
    days_remaining: int
    status: str

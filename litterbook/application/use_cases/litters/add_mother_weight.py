from __future__ import annotations

from dataclasses import dataclass
from datetime import date as DtDate
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.litters.update_litter import persist_fields
from litterbook.domain.models.dated_entries import MotherWeightEntry


@dataclass(slots=True)
class AddMotherWeightInput:
    date: DtDate
    weight: float
    notes: str | None = None


async def execute(
    uow: UnitOfWork, litter_id: UUID, payload: AddMotherWeightInput
) -> MotherWeightEntry:
    if payload.weight is None or payload.weight <= 0:
        raise ValidationError("Weight must be a positive number")
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    entry = litter.add_mother_weight(payload.date, payload.weight, payload.notes or None)
    await persist_fields(uow, litter, ["mother_weight_log"])
    await uow.commit()
    return entry

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.litters.update_litter import persist_fields
from litterbook.domain.models.litter import Litter


@dataclass(slots=True)
class UpdateMatingDatesInput:
    date_from: date | None = None
    date_to: date | None = None
    expected_date: date | None = None
    # False keeps the stored expected date whatever `expected_date` holds
    replace_expected_date: bool = False


async def execute(uow: UnitOfWork, litter_id: UUID, payload: UpdateMatingDatesInput) -> Litter:
    if payload.date_to and not payload.date_from:
        raise ValidationError("mating_date_to requires mating_date_from")
    if payload.date_from and payload.date_to and payload.date_to < payload.date_from:
        raise ValidationError("mating_date_to cannot be before mating_date_from")
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    litter.set_mating_window(payload.date_from, payload.date_to)
    fields = ["mating_date_from", "mating_date_to", "mating_date"]
    if payload.replace_expected_date:
        litter.set_expected_date(payload.expected_date)
        fields.append("expected_date")
    updated = await persist_fields(uow, litter, fields)
    await uow.commit()
    return updated

from __future__ import annotations

from datetime import date
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.litter_schedule import PregnancyProgress, pregnancy_progress


async def execute(uow: UnitOfWork, litter_id: UUID, today: date) -> PregnancyProgress:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    mating_date = litter.effective_mating_date
    if mating_date is None:
        raise ValidationError("Litter has no mating date yet")
    return pregnancy_progress(
        mating_date,
        today,
        expected_date=litter.expected_date,
        birth_date=litter.birth_date,
    )

from __future__ import annotations

from datetime import date
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.litter_schedule import Deadline, litter_deadlines


async def execute(uow: UnitOfWork, litter_id: UUID, today: date) -> list[Deadline]:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    if litter.birth_date is None:
        raise ValidationError("Deadlines are counted from the birth date, which is not set")
    return litter_deadlines(litter.birth_date, today)

from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.litters.update_litter import persist_fields
from litterbook.domain.models.litter import Litter, MissingMatingDate


async def execute(uow: UnitOfWork, litter_id: UUID) -> Litter:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    try:
        litter.calculate_expected_date()
    except MissingMatingDate as exc:
        raise ValidationError("Set a mating date before calculating the expected date") from exc
    updated = await persist_fields(uow, litter, ["expected_date"])
    await uow.commit()
    return updated

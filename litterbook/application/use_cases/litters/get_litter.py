from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.litter import Litter


async def execute(uow: UnitOfWork, litter_id: UUID) -> Litter:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    return litter

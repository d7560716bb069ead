from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.kitten import Kitten


async def execute(uow: UnitOfWork, litter_id: UUID) -> list[Kitten]:
    if not await uow.litters.get(litter_id):
        raise NotFound(f"Litter {litter_id} not found")
    return await uow.kittens.list_by_litter(litter_id)

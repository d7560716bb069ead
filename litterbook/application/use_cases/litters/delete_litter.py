from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound
from litterbook.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, litter_id: UUID) -> None:
    deleted = await uow.litters.delete(litter_id)
    if not deleted:
        raise NotFound("Litter not found")
    await uow.commit()

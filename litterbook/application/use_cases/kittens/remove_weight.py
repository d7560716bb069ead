from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.kitten import Kitten


async def execute(uow: UnitOfWork, kitten_id: UUID, entry_id: UUID) -> Kitten:
    kitten = await uow.kittens.get(kitten_id)
    if not kitten:
        raise NotFound(f"Kitten {kitten_id} not found")
    if not kitten.remove_weight(entry_id):
        return kitten
    updated = await uow.kittens.update_fields(
        kitten_id, {"weight_log": kitten.weight_log, "updated_at": kitten.updated_at}
    )
    await uow.commit()
    return updated or kitten

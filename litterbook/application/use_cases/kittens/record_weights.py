from __future__ import annotations

from datetime import date
from typing import Mapping
from uuid import UUID

from litterbook.application.errors import ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.kittens import list_kittens
from litterbook.domain.models.kitten import Kitten


async def execute(
    uow: UnitOfWork,
    litter_id: UUID,
    day: date,
    weights: Mapping[UUID, float],
) -> list[Kitten]:
    """Record one weighing per kitten for `day`.

    An existing entry on the same day is replaced. Kittens not listed keep
    their log as it is.
    """
    if not weights:
        raise ValidationError("No weights to save")
    for weight in weights.values():
        if weight is None or weight <= 0:
            raise ValidationError("Weights must be positive numbers of grams")
    roster = {kitten.id: kitten for kitten in await list_kittens.execute(uow, litter_id)}
    unknown = [str(kitten_id) for kitten_id in weights if kitten_id not in roster]
    if unknown:
        raise ValidationError("Kittens do not belong to this litter", details={"ids": unknown})

    updated: list[Kitten] = []
    for kitten_id, weight in weights.items():
        kitten = roster[kitten_id]
        kitten.record_weight(day, weight)
        saved = await uow.kittens.update_fields(
            kitten_id, {"weight_log": kitten.weight_log, "updated_at": kitten.updated_at}
        )
        updated.append(saved or kitten)
    await uow.commit()
    return updated

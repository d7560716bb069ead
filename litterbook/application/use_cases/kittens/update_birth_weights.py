from __future__ import annotations

from dataclasses import replace
from typing import Mapping
from uuid import UUID

from litterbook.application.errors import ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.kittens import list_kittens, replace_roster
from litterbook.domain.models.kitten import Kitten
from litterbook.domain.models.roster import KittenDraft


async def execute(
    uow: UnitOfWork,
    litter_id: UUID,
    weights: Mapping[UUID, float | None],
) -> list[Kitten]:
    """Set birth weights through a full-roster save.

    The current roster is fetched first and every kitten is resent with its
    stored fields, so only birth_weight changes.
    """
    current = await list_kittens.execute(uow, litter_id)
    known = {kitten.id for kitten in current}
    unknown = [str(kitten_id) for kitten_id in weights if kitten_id not in known]
    if unknown:
        raise ValidationError("Kittens do not belong to this litter", details={"ids": unknown})
    drafts = []
    for kitten in current:
        draft = KittenDraft.from_kitten(kitten)
        if kitten.id in weights:
            draft = replace(draft, birth_weight=weights[kitten.id])
        drafts.append(draft)
    return await replace_roster.execute(uow, litter_id, drafts)

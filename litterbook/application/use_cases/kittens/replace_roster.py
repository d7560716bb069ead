from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.kitten import Kitten
from litterbook.domain.models.roster import DuplicateKittenId, KittenDraft, reconcile_roster
from litterbook.domain.value_objects.kitten_status import (
    KittenComplication,
    KittenGender,
    KittenStatus,
)

logger = logging.getLogger(__name__)


def validate_kitten_fields(data: Mapping[str, Any]) -> None:
    gender = data.get("gender")
    if gender is not None and gender not in {g.value for g in KittenGender}:
        raise ValidationError("gender must be 'male', 'female' or null")
    if "status" in data:
        valid_status = {s.value for s in KittenStatus}
        if data["status"] not in valid_status:
            raise ValidationError(
                f"Invalid status. Must be one of: {', '.join(sorted(valid_status))}"
            )
    complication = data.get("complication_type")
    if complication is not None and complication not in {c.value for c in KittenComplication}:
        raise ValidationError(
            "complication_type must be stillborn, deceased, complications or null"
        )
    birth_weight = data.get("birth_weight")
    if birth_weight is not None and birth_weight <= 0:
        raise ValidationError("birth_weight must be a positive number of grams")


async def execute(uow: UnitOfWork, litter_id: UUID, kittens: Iterable[KittenDraft]) -> list[Kitten]:
    """Replace the whole roster of a litter in one commit.

    Stored kittens missing from `kittens` are deleted. Kittens kept by id get
    every roster field from their draft, so callers that only mean to change
    one field must send the full current record.
    """
    drafts = list(kittens)
    for draft in drafts:
        validate_kitten_fields(draft.fields())
    if not await uow.litters.get(litter_id):
        raise NotFound(f"Litter {litter_id} not found")
    existing = await uow.kittens.list_by_litter(litter_id)
    try:
        plan = reconcile_roster(litter_id, existing, drafts)
    except DuplicateKittenId as exc:
        raise ValidationError(str(exc)) from exc

    try:
        if plan.to_delete:
            await uow.kittens.delete_many(plan.to_delete)
        for kitten in plan.to_update:
            await uow.kittens.update(kitten)
        for kitten in plan.to_insert:
            await uow.kittens.add(kitten)
        await uow.commit()
    except Exception:
        await uow.rollback()
        raise
    logger.info(
        "Roster saved for litter %s: %d updated, %d added, %d removed",
        litter_id,
        len(plan.to_update),
        len(plan.to_insert),
        len(plan.to_delete),
    )
    return plan.roster

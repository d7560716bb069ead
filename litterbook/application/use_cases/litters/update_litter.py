from __future__ import annotations

from typing import Any, Mapping
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.litter import EDITABLE_FIELDS, Litter


def _validate(changes: Mapping[str, Any]) -> None:
    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValidationError(
            "Unknown or read-only litter fields", details={"fields": sorted(unknown)}
        )
    if "name" in changes and not (changes["name"] or "").strip():
        raise ValidationError("Litter name is required")
    kitten_count = changes.get("kitten_count")
    if kitten_count is not None and kitten_count < 0:
        raise ValidationError("kitten_count cannot be negative")
    coefficient = changes.get("inbreeding_coefficient")
    if coefficient is not None and not 0 <= coefficient <= 100:
        raise ValidationError("inbreeding_coefficient must be between 0 and 100")
    date_from = changes.get("mating_date_from")
    date_to = changes.get("mating_date_to")
    if date_from and date_to and date_to < date_from:
        raise ValidationError("mating_date_to cannot be before mating_date_from")


async def persist_fields(uow: UnitOfWork, litter: Litter, fields: list[str]) -> Litter:
    """Write only `fields` (plus version bookkeeping) back to the store."""
    data = {name: getattr(litter, name) for name in fields}
    data["version"] = litter.version
    data["updated_at"] = litter.updated_at
    updated = await uow.litters.update_fields(litter.id, data)
    if not updated:
        raise NotFound(f"Litter {litter.id} not found")
    return updated


async def execute(uow: UnitOfWork, litter_id: UUID, changes: Mapping[str, Any]) -> Litter:
    """Partial update: fields absent from `changes` stay as stored.

    expected_date is never recalculated here, even when the mating window
    moves.
    """
    _validate(changes)
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    if not changes:
        return litter
    if "name" in changes:
        changes = {**changes, "name": changes["name"].strip()}
    written = litter.apply_changes(changes)
    if "mating_date_from" in written:
        written.append("mating_date")
    updated = await persist_fields(uow, litter, written)
    await uow.commit()
    return updated

from __future__ import annotations

from typing import Any, Mapping
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.kittens.replace_roster import validate_kitten_fields
from litterbook.domain.models.kitten import ROSTER_FIELDS, Kitten


async def execute(uow: UnitOfWork, kitten_id: UUID, changes: Mapping[str, Any]) -> Kitten:
    """Partial update of one kitten; other fields and siblings stay untouched."""
    unknown = set(changes) - set(ROSTER_FIELDS)
    if unknown:
        raise ValidationError("Unknown kitten fields", details={"fields": sorted(unknown)})
    validate_kitten_fields(changes)
    kitten = await uow.kittens.get(kitten_id)
    if not kitten:
        raise NotFound(f"Kitten {kitten_id} not found")
    if not changes:
        return kitten
    kitten.apply_changes(changes)
    updated = await uow.kittens.update_fields(
        kitten_id, {**changes, "updated_at": kitten.updated_at}
    )
    if not updated:
        raise NotFound(f"Kitten {kitten_id} not found")
    await uow.commit()
    return updated

from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.litters.update_litter import persist_fields
from litterbook.domain.models.litter import Litter


async def execute(uow: UnitOfWork, litter_id: UUID, entry_id: UUID) -> Litter:
    """Remove one note; an unknown entry id leaves the log untouched."""
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    if not litter.remove_pregnancy_note(entry_id):
        return litter
    updated = await persist_fields(uow, litter, ["pregnancy_notes_log"])
    await uow.commit()
    return updated

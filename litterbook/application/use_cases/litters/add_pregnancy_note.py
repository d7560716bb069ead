from __future__ import annotations

from dataclasses import dataclass
from datetime import date as DtDate
from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.litters.update_litter import persist_fields
from litterbook.domain.models.dated_entries import PregnancyNoteEntry


@dataclass(slots=True)
class AddPregnancyNoteInput:
    date: DtDate
    note: str


async def execute(
    uow: UnitOfWork, litter_id: UUID, payload: AddPregnancyNoteInput
) -> PregnancyNoteEntry:
    note = (payload.note or "").strip()
    if not note:
        raise ValidationError("Note text is required")
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    entry = litter.add_pregnancy_note(payload.date, note)
    await persist_fields(uow, litter, ["pregnancy_notes_log"])
    await uow.commit()
    return entry

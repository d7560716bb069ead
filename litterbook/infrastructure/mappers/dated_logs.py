from __future__ import annotations

from typing import Any
from uuid import UUID

from litterbook.domain.models.dated_entries import (
    MotherWeightEntry,
    PregnancyNoteEntry,
    WeightEntry,
)
from litterbook.domain.models.dated_log import DatedEntryLog
from litterbook.utils.dates import parse_iso_date


def _entry_id(raw: dict[str, Any]) -> UUID | None:
    value = raw.get("id")
    return UUID(str(value)) if value else None


def _items(raw: Any) -> list[dict[str, Any]]:
    # Anything but a JSON array of objects reads as an empty log.
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict) and item.get("date")]


def pregnancy_notes_from_json(raw: Any) -> DatedEntryLog[PregnancyNoteEntry]:
    return DatedEntryLog(
        PregnancyNoteEntry(
            id=_entry_id(item),
            date=parse_iso_date(item["date"]),
            note=item.get("note") or "",
        )
        for item in _items(raw)
    )


def mother_weights_from_json(raw: Any) -> DatedEntryLog[MotherWeightEntry]:
    return DatedEntryLog(
        MotherWeightEntry(
            id=_entry_id(item),
            date=parse_iso_date(item["date"]),
            weight=float(item.get("weight") or 0),
            notes=item.get("notes"),
        )
        for item in _items(raw)
    )


def weights_from_json(raw: Any) -> DatedEntryLog[WeightEntry]:
    return DatedEntryLog(
        WeightEntry(
            id=_entry_id(item),
            date=parse_iso_date(item["date"]),
            weight=float(item.get("weight") or 0),
        )
        for item in _items(raw)
    )


def log_to_json(log: DatedEntryLog) -> list[dict[str, Any]]:
    result = []
    for entry in log:
        item: dict[str, Any] = {"id": str(entry.id), "date": entry.date.isoformat()}
        if isinstance(entry, PregnancyNoteEntry):
            item["note"] = entry.note
        elif isinstance(entry, MotherWeightEntry):
            item["weight"] = entry.weight
            item["notes"] = entry.notes
        else:
            item["weight"] = entry.weight
        result.append(item)
    return result

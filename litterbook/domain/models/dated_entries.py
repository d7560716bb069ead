from __future__ import annotations

from dataclasses import dataclass
from datetime import date as DtDate
from uuid import UUID


@dataclass(frozen=True, slots=True)
class PregnancyNoteEntry:
    date: DtDate
    note: str
    id: UUID | None = None


@dataclass(frozen=True, slots=True)
class WeightEntry:
    """A single weighing in grams; used for per-kitten growth logs."""

    date: DtDate
    weight: float
    id: UUID | None = None


@dataclass(frozen=True, slots=True)
class MotherWeightEntry:
    date: DtDate
    weight: float
    notes: str | None = None
    id: UUID | None = None

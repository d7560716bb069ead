from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Mapping
from uuid import UUID, uuid4

from litterbook.domain.models.dated_entries import MotherWeightEntry, PregnancyNoteEntry
from litterbook.domain.models.dated_log import DatedEntryLog
from litterbook.domain.value_objects.litter_phase import LitterPhase
from litterbook.utils.dates import add_days

# Typical feline gestation, counted from the first mating day.
GESTATION_DAYS = 65

EDITABLE_FIELDS: frozenset[str] = frozenset(
    {
        "name",
        "mother_id",
        "father_id",
        "external_father_name",
        "external_father_pedigree_url",
        "mating_date_from",
        "mating_date_to",
        "expected_date",
        "birth_date",
        "completion_date",
        "reasoning",
        "inbreeding_coefficient",
        "blood_type_notes",
        "alternative_combinations",
        "mating_notes",
        "pregnancy_notes",
        "kitten_count",
        "birth_notes",
        "nrr_registered",
        "evaluation",
        "buyers_info",
        "notes",
    }
)


class MissingMatingDate(ValueError):
    pass


def due_date(mating_date: date) -> date:
    return add_days(mating_date, GESTATION_DAYS)


@dataclass(slots=True)
class Litter:
    id: UUID
    name: str
    phase: LitterPhase = LitterPhase.PLANNED

    # Parents
    mother_id: UUID | None = None
    father_id: UUID | None = None
    external_father_name: str | None = None
    external_father_pedigree_url: str | None = None

    # Dates; mating_date is the legacy single date mirrored from mating_date_from
    mating_date_from: date | None = None
    mating_date_to: date | None = None
    mating_date: date | None = None
    expected_date: date | None = None
    birth_date: date | None = None
    completion_date: date | None = None

    # Planning phase
    reasoning: str | None = None
    inbreeding_coefficient: float | None = None
    blood_type_notes: str | None = None
    alternative_combinations: str | None = None

    # Pregnancy phase
    mating_notes: str | None = None
    pregnancy_notes: str | None = None
    pregnancy_notes_log: DatedEntryLog[PregnancyNoteEntry] = field(default_factory=DatedEntryLog)
    mother_weight_log: DatedEntryLog[MotherWeightEntry] = field(default_factory=DatedEntryLog)

    # Active phase
    kitten_count: int | None = None
    birth_notes: str | None = None

    # Completion phase
    nrr_registered: bool = False
    evaluation: str | None = None
    buyers_info: str | None = None

    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        name: str,
        mother_id: UUID | None = None,
        father_id: UUID | None = None,
        external_father_name: str | None = None,
        external_father_pedigree_url: str | None = None,
        reasoning: str | None = None,
        inbreeding_coefficient: float | None = None,
        blood_type_notes: str | None = None,
        alternative_combinations: str | None = None,
        notes: str | None = None,
    ) -> Litter:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            phase=LitterPhase.PLANNED,
            mother_id=mother_id,
            father_id=father_id,
            external_father_name=external_father_name,
            external_father_pedigree_url=external_father_pedigree_url,
            reasoning=reasoning,
            inbreeding_coefficient=inbreeding_coefficient,
            blood_type_notes=blood_type_notes,
            alternative_combinations=alternative_combinations,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def effective_mating_date(self) -> date | None:
        return self.mating_date_from or self.mating_date

    def calculate_expected_date(self) -> date:
        """Store mating_date_from + GESTATION_DAYS as the expected date.

        Only runs when asked; later edits of the mating window leave the
        stored value as it is.
        """
        if self.mating_date_from is None:
            raise MissingMatingDate("mating_date_from is required to calculate the expected date")
        self.expected_date = due_date(self.mating_date_from)
        self.bump_version()
        return self.expected_date

    def set_mating_window(self, date_from: date | None, date_to: date | None = None) -> None:
        """Move the mating window; the stored expected date is left as it is."""
        self.mating_date_from = date_from
        self.mating_date_to = date_to
        self.mating_date = date_from
        self.bump_version()

    def set_expected_date(self, expected_date: date | None) -> None:
        self.expected_date = expected_date
        self.bump_version()

    def set_phase(self, phase: LitterPhase | str) -> None:
        self.phase = LitterPhase(phase)
        self.bump_version()

    def apply_changes(self, data: Mapping[str, Any]) -> list[str]:
        """Apply a partial field set; returns the names that were written."""
        unknown = set(data) - EDITABLE_FIELDS
        if unknown:
            raise KeyError(", ".join(sorted(unknown)))
        changed: list[str] = []
        for name, value in data.items():
            setattr(self, name, value)
            changed.append(name)
        if "mating_date_from" in data:
            self.mating_date = data["mating_date_from"]
        if self.nrr_registered is None:
            self.nrr_registered = False
        if changed:
            self.bump_version()
        return changed

    def add_pregnancy_note(self, day: date, note: str) -> PregnancyNoteEntry:
        entry = self.pregnancy_notes_log.append(PregnancyNoteEntry(date=day, note=note))
        self.bump_version()
        return entry

    def remove_pregnancy_note(self, entry_id: UUID) -> bool:
        removed = self.pregnancy_notes_log.remove(entry_id)
        if removed:
            self.bump_version()
        return removed

    def add_mother_weight(
        self, day: date, weight: float, notes: str | None = None
    ) -> MotherWeightEntry:
        entry = self.mother_weight_log.append(
            MotherWeightEntry(date=day, weight=weight, notes=notes)
        )
        self.bump_version()
        return entry

    def remove_mother_weight(self, entry_id: UUID) -> bool:
        removed = self.mother_weight_log.remove(entry_id)
        if removed:
            self.bump_version()
        return removed

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)

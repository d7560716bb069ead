from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Mapping
from uuid import UUID, uuid4

from litterbook.domain.models.dated_entries import WeightEntry
from litterbook.domain.models.dated_log import DatedEntryLog
from litterbook.domain.value_objects.kitten_status import KittenStatus

# Fields a roster save writes; identity and ownership are handled separately.
ROSTER_FIELDS: tuple[str, ...] = (
    "name",
    "gender",
    "color",
    "ems_code",
    "status",
    "reserved_by",
    "notes",
    "birth_weight",
    "complication_type",
)


@dataclass(slots=True)
class Kitten:
    id: UUID
    litter_id: UUID
    name: str | None = None
    gender: str | None = None  # 'male' | 'female' | None
    color: str | None = None
    ems_code: str | None = None
    status: str = KittenStatus.AVAILABLE.value
    reserved_by: str | None = None
    notes: str | None = None
    birth_weight: float | None = None
    complication_type: str | None = None  # stillborn | deceased | complications | None
    weight_log: DatedEntryLog[WeightEntry] = field(default_factory=DatedEntryLog)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        litter_id: UUID,
        name: str | None = None,
        gender: str | None = None,
        color: str | None = None,
        ems_code: str | None = None,
        status: str = KittenStatus.AVAILABLE.value,
        reserved_by: str | None = None,
        notes: str | None = None,
        birth_weight: float | None = None,
        complication_type: str | None = None,
    ) -> Kitten:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            litter_id=litter_id,
            name=name,
            gender=gender,
            color=color,
            ems_code=ems_code,
            status=status,
            reserved_by=reserved_by,
            notes=notes,
            birth_weight=birth_weight,
            complication_type=complication_type,
            created_at=now,
            updated_at=now,
        )

    def roster_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in ROSTER_FIELDS}

    def apply_changes(self, data: Mapping[str, Any]) -> None:
        unknown = set(data) - set(ROSTER_FIELDS)
        if unknown:
            raise KeyError(", ".join(sorted(unknown)))
        for name, value in data.items():
            setattr(self, name, value)
        self.touch()

    def record_weight(self, day: date, weight: float) -> WeightEntry:
        """Record the weighing for `day`, replacing any earlier one that day."""
        entry = self.weight_log.replace_on(day, WeightEntry(date=day, weight=weight))
        self.touch()
        return entry

    def remove_weight(self, entry_id: UUID) -> bool:
        removed = self.weight_log.remove(entry_id)
        if removed:
            self.touch()
        return removed

    def label(self, index: int) -> str:
        return self.name or self.color or f"Kitten {index + 1}"

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

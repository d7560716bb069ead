from __future__ import annotations

from enum import Enum


class LitterPhase(str, Enum):
    PLANNED = "planned"
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def rank(self) -> int:
        return PHASE_ORDER.index(self)

    def is_at_least(self, other: LitterPhase) -> bool:
        return self.rank >= other.rank


PHASE_ORDER: tuple[LitterPhase, ...] = (
    LitterPhase.PLANNED,
    LitterPhase.PENDING,
    LitterPhase.ACTIVE,
    LitterPhase.COMPLETED,
)

PHASE_DESCRIPTIONS: dict[LitterPhase, str] = {
    LitterPhase.PLANNED: "Combination under consideration, no mating yet",
    LitterPhase.PENDING: "Mating done, waiting for birth",
    LitterPhase.ACTIVE: "Kittens born and under observation",
    LitterPhase.COMPLETED: "All kittens have moved to new homes",
}

# Editor guidance only; storage accepts any field in any phase.
GENERAL_FIELDS: tuple[str, ...] = (
    "name",
    "mother_id",
    "father_id",
    "external_father_name",
    "external_father_pedigree_url",
    "notes",
)
PLANNING_FIELDS: tuple[str, ...] = (
    "reasoning",
    "inbreeding_coefficient",
    "blood_type_notes",
    "alternative_combinations",
)
MATING_FIELDS: tuple[str, ...] = (
    "mating_date_from",
    "mating_date_to",
    "expected_date",
    "mating_notes",
    "pregnancy_notes",
    "pregnancy_notes_log",
)
BIRTH_FIELDS: tuple[str, ...] = (
    "birth_date",
    "kitten_count",
    "kittens",
    "birth_notes",
    "mother_weight_log",
)
COMPLETION_FIELDS: tuple[str, ...] = (
    "completion_date",
    "evaluation",
    "buyers_info",
    "nrr_registered",
)


def applicable_fields(phase: LitterPhase) -> tuple[str, ...]:
    """Fields an editor should offer for a litter in `phase`."""
    phase = LitterPhase(phase)
    fields: list[str] = [*GENERAL_FIELDS]
    if phase is LitterPhase.PLANNED:
        fields.extend(PLANNING_FIELDS)
    if phase.is_at_least(LitterPhase.PENDING):
        fields.extend(MATING_FIELDS)
    if phase.is_at_least(LitterPhase.ACTIVE):
        fields.extend(BIRTH_FIELDS)
    if phase is LitterPhase.COMPLETED:
        fields.extend(COMPLETION_FIELDS)
    return tuple(fields)


def is_forward_transition(current: LitterPhase, target: LitterPhase) -> bool:
    """True when `target` is the same phase or a later one."""
    return LitterPhase(target).rank >= LitterPhase(current).rank

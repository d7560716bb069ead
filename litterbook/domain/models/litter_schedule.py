from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from litterbook.domain.models.litter import GESTATION_DAYS, due_date
from litterbook.utils.dates import add_days, days_between

PREGNANCY_WEEKS = 9


@dataclass(frozen=True, slots=True)
class WeekMarker:
    week: int
    day: int
    date: date
    is_past: bool
    is_current: bool


@dataclass(frozen=True, slots=True)
class PregnancyProgress:
    mating_date: date
    expected_date: date
    days_pregnant: int
    days_until_birth: int
    progress_percentage: float
    weeks: tuple[WeekMarker, ...]
    birth_date: date | None = None
    actual_gestation_days: int | None = None


def pregnancy_progress(
    mating_date_from: date,
    today: date,
    expected_date: date | None = None,
    birth_date: date | None = None,
) -> PregnancyProgress:
    """Progress counted from the first mating day.

    A stored expected date wins over the computed one, so a stale value shows
    up here exactly as stored.
    """
    target = expected_date or due_date(mating_date_from)
    days_pregnant = days_between(mating_date_from, today)
    percentage = min(100.0, max(0.0, days_pregnant / GESTATION_DAYS * 100))
    weeks = []
    for week in range(1, PREGNANCY_WEEKS + 1):
        week_date = add_days(mating_date_from, week * 7)
        weeks.append(
            WeekMarker(
                week=week,
                day=week * 7,
                date=week_date,
                is_past=week_date < today,
                is_current=(week - 1) * 7 <= days_pregnant < week * 7,
            )
        )
    return PregnancyProgress(
        mating_date=mating_date_from,
        expected_date=target,
        days_pregnant=days_pregnant,
        days_until_birth=days_between(today, target),
        progress_percentage=round(percentage, 1),
        weeks=tuple(weeks),
        birth_date=birth_date,
        actual_gestation_days=(
            days_between(mating_date_from, birth_date) if birth_date is not None else None
        ),
    )


class DeadlineType(str, Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    DEADLINE = "deadline"


class DeadlineStatus(str, Enum):
    DONE = "done"
    CURRENT = "current"
    UPCOMING = "upcoming"


@dataclass(frozen=True, slots=True)
class DeadlineDefinition:
    key: str
    days_after_birth: int
    task: str
    type: DeadlineType
    category: str


@dataclass(frozen=True, slots=True)
class Deadline:
    definition: DeadlineDefinition
    due_on: date
    days_remaining: int
    status: DeadlineStatus


DEADLINES: tuple[DeadlineDefinition, ...] = (
    DeadlineDefinition(
        "weighing-day1", 0, "Weigh and register every kitten", DeadlineType.REQUIRED, "After birth"
    ),
    DeadlineDefinition(
        "daily-weighing", 1, "Start daily weighing (weeks 1-8)", DeadlineType.REQUIRED, "After birth"
    ),
    DeadlineDefinition(
        "deworming-consider",
        21,
        "Consider deworming, ask the vet if unsure",
        DeadlineType.OPTIONAL,
        "After birth",
    ),
    DeadlineDefinition(
        "vet-check", 56, "Vet check and health exam (weeks 8-9)", DeadlineType.REQUIRED,
        "Vaccination & ID",
    ),
    DeadlineDefinition(
        "first-vaccine", 70, "First vaccine (weeks 10-11)", DeadlineType.REQUIRED,
        "Vaccination & ID",
    ),
    DeadlineDefinition(
        "microchip", 77, "Microchip ID (weeks 10-12)", DeadlineType.REQUIRED, "Vaccination & ID"
    ),
    DeadlineDefinition(
        "second-vaccine", 98, "Second vaccine (3-4 weeks after the first)",
        DeadlineType.REQUIRED, "Vaccination & ID",
    ),
    DeadlineDefinition(
        "nrr-registration", 56, "Register the litter with the breed registry",
        DeadlineType.DEADLINE, "Registration",
    ),
    DeadlineDefinition(
        "pedigrees", 84, "Pedigrees ordered or received", DeadlineType.REQUIRED, "Registration"
    ),
    DeadlineDefinition(
        "fully-vaccinated", 105, "Fully vaccinated (1-2 weeks after second vaccine)",
        DeadlineType.REQUIRED, "Before delivery",
    ),
    DeadlineDefinition(
        "deworming-pre-delivery", 98, "Consider deworming, ask the vet",
        DeadlineType.OPTIONAL, "Before delivery",
    ),
    DeadlineDefinition(
        "contract", 84, "Purchase contract signed", DeadlineType.REQUIRED, "Before delivery"
    ),
    DeadlineDefinition(
        "health-cert", 105, "Health certificate from the vet", DeadlineType.OPTIONAL,
        "Before delivery",
    ),
    DeadlineDefinition(
        "delivery-docs", 105, "Vaccination card, pedigree and food sample ready",
        DeadlineType.REQUIRED, "Before delivery",
    ),
)


def deadline_status(days_remaining: int) -> DeadlineStatus:
    if days_remaining < -3:
        return DeadlineStatus.DONE
    if days_remaining <= 7:
        return DeadlineStatus.CURRENT
    return DeadlineStatus.UPCOMING


def litter_deadlines(birth_date: date, today: date) -> list[Deadline]:
    result = []
    for definition in DEADLINES:
        due_on = add_days(birth_date, definition.days_after_birth)
        remaining = days_between(today, due_on)
        result.append(
            Deadline(
                definition=definition,
                due_on=due_on,
                days_remaining=remaining,
                status=deadline_status(remaining),
            )
        )
    return result

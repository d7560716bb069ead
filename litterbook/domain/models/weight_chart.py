from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from litterbook.domain.models.kitten import Kitten
from litterbook.utils.dates import add_days, format_day_month, weekday_short

CHART_DAYS = 28
SLOTS_PER_DAY = 4
SLOT_LABELS: tuple[str, ...] = ("Morning", "Midday", "Evening", "Night")
LEADING_COLUMNS: tuple[str, ...] = ("Day", "Date")
PLACEHOLDER_LABELS: tuple[str, ...] = ("Kitten 1", "Kitten 2", "Kitten 3", "Kitten 4")


@dataclass(frozen=True, slots=True)
class WeightChartRow:
    day: int
    date: date
    day_label: str
    date_label: str
    cells: tuple[str, ...]

    def as_list(self) -> list[str]:
        return [self.day_label, self.date_label, *self.cells]


@dataclass(slots=True)
class WeightChart:
    birth_date: date
    kitten_labels: list[str]
    rows: list[WeightChartRow] = field(default_factory=list)

    @property
    def columns(self) -> list[str]:
        cols = list(LEADING_COLUMNS)
        for label in self.kitten_labels:
            cols.extend(f"{label} {slot}" for slot in SLOT_LABELS)
        return cols

    @property
    def column_count(self) -> int:
        return len(LEADING_COLUMNS) + SLOTS_PER_DAY * len(self.kitten_labels)

    @property
    def last_day(self) -> date:
        return self.rows[-1].date


def build_weight_chart(birth_date: date, kittens: Sequence[Kitten]) -> WeightChart:
    """Blank weighing grid for the first four weeks after birth.

    Days 0..28 inclusive, four slots per kitten per day. An empty roster
    gets four placeholder kittens so the sheet can be printed in advance.
    """
    if kittens:
        labels = [kitten.label(index) for index, kitten in enumerate(kittens)]
    else:
        labels = list(PLACEHOLDER_LABELS)
    empty_cells = ("",) * (SLOTS_PER_DAY * len(labels))
    rows = []
    for day in range(CHART_DAYS + 1):
        current = add_days(birth_date, day)
        rows.append(
            WeightChartRow(
                day=day,
                date=current,
                day_label=f"Day {day} ({weekday_short(current)})",
                date_label=format_day_month(current),
                cells=empty_cells,
            )
        )
    return WeightChart(birth_date=birth_date, kitten_labels=labels, rows=rows)

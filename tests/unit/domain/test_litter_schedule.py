from __future__ import annotations

from datetime import date

import pytest

from litterbook.domain.models.litter_schedule import (
    DEADLINES,
    DeadlineStatus,
    deadline_status,
    litter_deadlines,
    pregnancy_progress,
)


def test_progress_midway():
    progress = pregnancy_progress(date(2024, 1, 10), today=date(2024, 2, 10))
    assert progress.expected_date == date(2024, 3, 15)
    assert progress.days_pregnant == 31
    assert progress.days_until_birth == 34
    assert progress.progress_percentage == 47.7
    assert len(progress.weeks) == 9
    current = [w.week for w in progress.weeks if w.is_current]
    assert current == [5]


def test_progress_is_clamped():
    before = pregnancy_progress(date(2024, 1, 10), today=date(2024, 1, 1))
    after = pregnancy_progress(date(2024, 1, 10), today=date(2024, 5, 1))
    assert before.progress_percentage == 0.0
    assert after.progress_percentage == 100.0


def test_stored_expected_date_wins():
    progress = pregnancy_progress(
        date(2024, 1, 20), today=date(2024, 2, 10), expected_date=date(2024, 3, 15)
    )
    assert progress.expected_date == date(2024, 3, 15)


def test_actual_gestation_days_from_birth_date():
    progress = pregnancy_progress(
        date(2024, 1, 10), today=date(2024, 3, 20), birth_date=date(2024, 3, 14)
    )
    assert progress.actual_gestation_days == 64


@pytest.mark.parametrize(
    "remaining,expected",
    [
        (-10, DeadlineStatus.DONE),
        (-4, DeadlineStatus.DONE),
        (-3, DeadlineStatus.CURRENT),
        (0, DeadlineStatus.CURRENT),
        (7, DeadlineStatus.CURRENT),
        (8, DeadlineStatus.UPCOMING),
    ],
)
def test_deadline_status_thresholds(remaining, expected):
    assert deadline_status(remaining) is expected


def test_deadlines_are_anchored_on_birth_date():
    deadlines = litter_deadlines(date(2024, 3, 1), today=date(2024, 3, 1))
    assert len(deadlines) == len(DEADLINES)
    by_key = {d.definition.key: d for d in deadlines}
    assert by_key["weighing-day1"].due_on == date(2024, 3, 1)
    assert by_key["weighing-day1"].status is DeadlineStatus.CURRENT
    assert by_key["first-vaccine"].due_on == date(2024, 5, 10)
    assert by_key["first-vaccine"].status is DeadlineStatus.UPCOMING

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from litterbook.domain.models.litter import GESTATION_DAYS, due_date
from litterbook.utils.dates import (
    add_days,
    days_between,
    format_day_month,
    parse_iso_date,
    weekday_short,
)


def test_due_date_is_65_days_after_mating_for_every_day_of_a_leap_year():
    day = date(2024, 1, 1)
    while day.year == 2024:
        result = due_date(day)
        assert days_between(day, result) == GESTATION_DAYS
        assert result == day + timedelta(days=65)
        day += timedelta(days=1)


def test_due_date_across_leap_february():
    assert due_date(date(2024, 1, 10)) == date(2024, 3, 15)
    assert due_date(date(2023, 1, 10)) == date(2023, 3, 16)
    assert due_date(date(2024, 2, 29)) == date(2024, 5, 4)


def test_add_days_ignores_time_of_day_and_offset():
    late = datetime(2024, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert add_days(late, 1) == date(2024, 3, 2)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("2024-03-01", date(2024, 3, 1)),
        ("2024-03-01T22:15:00Z", date(2024, 3, 1)),
        ("2024-03-01T00:00:00+02:00", date(2024, 3, 1)),
        (datetime(2024, 3, 1, 8, 0), date(2024, 3, 1)),
        ("", None),
        (None, None),
    ],
)
def test_parse_iso_date(raw, expected):
    assert parse_iso_date(raw) == expected


def test_short_labels():
    assert format_day_month(date(2024, 3, 1)) == "1.03"
    assert format_day_month(date(2024, 12, 25)) == "25.12"
    assert weekday_short(date(2024, 3, 1)) == "Fri"

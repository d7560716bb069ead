from __future__ import annotations

from datetime import date, datetime, timedelta

_DOW_EN = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def add_days(d: date, days: int) -> date:
    """Return the calendar date `days` after `d`.

    Datetimes are reduced to their calendar date first so that no timezone
    offset can shift the result across midnight.
    """
    if isinstance(d, datetime):
        d = d.date()
    return d + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    return (end - start).days


def parse_iso_date(value: date | datetime | str | None) -> date | None:
    """Accept ISO date/datetime strings (with optional trailing 'Z')."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = value.strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    if "T" in s or " " in s:
        return datetime.fromisoformat(s).date()
    return date.fromisoformat(s)


def format_day_month(d: date) -> str:
    """Return '1.03' style short labels used on printed charts."""
    return f"{d.day}.{d.month:02d}"


def weekday_short(d: date) -> str:
    return _DOW_EN[d.weekday()]

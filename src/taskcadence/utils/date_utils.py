"""Naive calendar-date helpers shared by the recurrence engine."""

from __future__ import annotations

from datetime import date, datetime, timedelta


def as_date(value: date | datetime | str) -> date:
    """Coerce a date, datetime or ISO-8601 string to a calendar date.

    Any time component is dropped as-is; no zone conversion is performed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip()).date()
    raise TypeError(f"Cannot interpret {value!r} as a date")


def js_weekday(value: date) -> int:
    """Weekday index with 0 = Sunday through 6 = Saturday."""
    return value.isoweekday() % 7


def rolled_date(year: int, month: int, day: int) -> date:
    """Build a date, letting a day past the month end roll into the next month.

    rolled_date(2023, 2, 31) is 2023-03-03.
    """
    return date(year, month, 1) + timedelta(days=day - 1)

"""Recurrence presets and name tables."""

from __future__ import annotations

from enum import Enum

from taskcadence.models.recurrence import RecurrencePattern

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DAY_NAMES_FULL = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
MONTH_NAMES_FULL = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

FREQUENCY_LABELS: dict[str, str] = {
    "daily": "Day(s)",
    "weekly": "Week(s)",
    "monthly": "Month(s)",
    "yearly": "Year(s)",
    "custom": "Custom",
}


class RecurrencePreset(str, Enum):
    """Quick-pick recurrence choices."""

    EVERY_DAY = "every_day"
    EVERY_WEEKDAY = "every_weekday"
    EVERY_WEEK = "every_week"
    EVERY_2_WEEKS = "every_2_weeks"
    EVERY_MONTH = "every_month"
    EVERY_QUARTER = "every_quarter"
    EVERY_YEAR = "every_year"
    CUSTOM = "custom"


# (label, description) per preset
PRESET_LABELS: dict[RecurrencePreset, tuple[str, str]] = {
    RecurrencePreset.EVERY_DAY: ("Daily", "Repeats every day"),
    RecurrencePreset.EVERY_WEEKDAY: ("Weekdays", "Monday through Friday"),
    RecurrencePreset.EVERY_WEEK: ("Weekly", "Repeats every week"),
    RecurrencePreset.EVERY_2_WEEKS: ("Bi-weekly", "Every two weeks"),
    RecurrencePreset.EVERY_MONTH: ("Monthly", "Repeats every month"),
    RecurrencePreset.EVERY_QUARTER: ("Quarterly", "Every three months"),
    RecurrencePreset.EVERY_YEAR: ("Yearly", "Repeats every year"),
    RecurrencePreset.CUSTOM: ("Custom", "Custom schedule"),
}

_PRESET_PATTERNS: dict[RecurrencePreset, dict] = {
    RecurrencePreset.EVERY_DAY: {"frequency": "daily", "interval": 1},
    RecurrencePreset.EVERY_WEEKDAY: {
        "frequency": "weekly",
        "interval": 1,
        "days_of_week": (1, 2, 3, 4, 5),
    },
    RecurrencePreset.EVERY_WEEK: {"frequency": "weekly", "interval": 1},
    RecurrencePreset.EVERY_2_WEEKS: {"frequency": "weekly", "interval": 2},
    RecurrencePreset.EVERY_MONTH: {"frequency": "monthly", "interval": 1},
    RecurrencePreset.EVERY_QUARTER: {"frequency": "monthly", "interval": 3},
    RecurrencePreset.EVERY_YEAR: {"frequency": "yearly", "interval": 1},
    RecurrencePreset.CUSTOM: {"frequency": "custom", "interval": 1},
}


def default_pattern() -> RecurrencePattern:
    """Pattern used when a task is first marked as recurring."""
    return RecurrencePattern(frequency="daily", interval=1)


def pattern_from_preset(preset: RecurrencePreset | str) -> RecurrencePattern:
    """Return the pattern for a preset; unknown names fall back to custom."""
    try:
        key = RecurrencePreset(preset)
    except ValueError:
        key = RecurrencePreset.CUSTOM
    return RecurrencePattern(**_PRESET_PATTERNS[key])


def is_preset_name(name: str) -> bool:
    return name in {preset.value for preset in RecurrencePreset}


def patterns_equal(a: RecurrencePattern | None, b: RecurrencePattern | None) -> bool:
    """Compare two patterns field by field.

    Weekday selections compare as sets. Custom offsets are not compared.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False

    def _days(pattern: RecurrencePattern) -> frozenset[int] | None:
        if pattern.days_of_week is None:
            return None
        return frozenset(pattern.days_of_week)

    return (
        a.frequency == b.frequency
        and a.interval == b.interval
        and _days(a) == _days(b)
        and a.day_of_month == b.day_of_month
        and a.month_of_year == b.month_of_year
        and a.end_date == b.end_date
        and a.max_occurrences == b.max_occurrences
    )

"""Tagged-union view of a recurrence pattern.

The flat ``RecurrencePattern`` record carries optional fields that only mean
something for one frequency. ``schedule_from_pattern`` maps it onto one rule
variant per frequency plus a shared interval/termination envelope, dropping
fields that do not belong to the selected frequency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from taskcadence.exceptions import InvalidPatternError

if TYPE_CHECKING:
    from taskcadence.models.recurrence import RecurrencePattern


@dataclass(frozen=True)
class DailyRule:
    """Every ``interval`` days."""


@dataclass(frozen=True)
class WeeklyRule:
    """Every ``interval`` weeks, optionally on selected weekdays (0 = Sunday)."""

    days_of_week: tuple[int, ...] = ()


@dataclass(frozen=True)
class MonthlyRule:
    """Every ``interval`` months, optionally pinned to a day of the month."""

    day_of_month: int | None = None


@dataclass(frozen=True)
class YearlyRule:
    """Every ``interval`` years, optionally pinned to a month (and day)."""

    month_of_year: int | None = None
    day_of_month: int | None = None


@dataclass(frozen=True)
class CustomRule:
    """Day offsets from the anchor date."""

    offsets: tuple[int, ...] = ()


Rule = DailyRule | WeeklyRule | MonthlyRule | YearlyRule | CustomRule


@dataclass(frozen=True)
class Termination:
    """When a schedule stops producing occurrences."""

    end_date: date | None = None
    max_occurrences: int | None = None


@dataclass(frozen=True)
class Schedule:
    """A rule variant wrapped in the envelope shared by every frequency."""

    rule: Rule
    interval: int = 1
    termination: Termination = field(default_factory=Termination)


def schedule_from_pattern(pattern: RecurrencePattern) -> Schedule:
    """Map a flat pattern record onto its tagged schedule.

    Raises:
        InvalidPatternError: If the frequency is not one of the known values.
    """
    frequency = pattern.frequency
    if frequency == "daily":
        rule: Rule = DailyRule()
    elif frequency == "weekly":
        rule = WeeklyRule(tuple(sorted(set(pattern.days_of_week or ()))))
    elif frequency == "monthly":
        rule = MonthlyRule(pattern.day_of_month or None)
    elif frequency == "yearly":
        rule = YearlyRule(pattern.month_of_year or None, pattern.day_of_month or None)
    elif frequency == "custom":
        rule = CustomRule(tuple(pattern.custom_days or ()))
    else:
        raise InvalidPatternError([f"Unknown frequency: {frequency!r}"])

    return Schedule(
        rule=rule,
        interval=pattern.interval,
        termination=Termination(
            end_date=pattern.end_date,
            max_occurrences=pattern.max_occurrences,
        ),
    )

"""Human-readable descriptions of recurrence patterns."""

from __future__ import annotations

from taskcadence.models.presets import DAY_NAMES, MONTH_NAMES
from taskcadence.models.recurrence import RecurrencePattern

_WEEKDAYS = (1, 2, 3, 4, 5)
_WEEKENDS = (0, 6)


def ordinal(n: int) -> str:
    """Return ``n`` with its English ordinal suffix (1st, 2nd, 11th, 23rd)."""
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _every(interval: int, unit: str, single: str) -> str:
    return single if interval == 1 else f"Every {interval} {unit}"


def describe(pattern: RecurrencePattern) -> str:
    """Render a pattern as display text, e.g. "Every 2 weeks on Mon, Wed"."""
    interval = pattern.interval
    frequency = pattern.frequency

    if frequency == "daily":
        return _every(interval, "days", "Daily")

    if frequency == "weekly":
        if pattern.days_of_week:
            selected = tuple(sorted(set(pattern.days_of_week)))
            if len(selected) == 7:
                return "Daily"
            if selected == _WEEKDAYS:
                return "Weekdays"
            if selected == _WEEKENDS:
                return "Weekends"
            if all(0 <= day <= 6 for day in selected):
                days = ", ".join(DAY_NAMES[day] for day in selected)
                if interval == 1:
                    return f"Weekly on {days}"
                return f"Every {interval} weeks on {days}"
        return _every(interval, "weeks", "Weekly")

    if frequency == "monthly":
        if pattern.day_of_month:
            day = ordinal(pattern.day_of_month)
            if interval == 1:
                return f"Monthly on the {day}"
            return f"Every {interval} months on the {day}"
        return _every(interval, "months", "Monthly")

    if frequency == "yearly":
        month = pattern.month_of_year
        if month and 1 <= month <= 12 and pattern.day_of_month:
            on = f"{MONTH_NAMES[month - 1]} {pattern.day_of_month}"
            if interval == 1:
                return f"Yearly on {on}"
            return f"Every {interval} years on {on}"
        return _every(interval, "years", "Yearly")

    if frequency == "custom":
        return "Custom schedule"

    return "Recurring"


def describe_termination(pattern: RecurrencePattern) -> str:
    """Describe when a pattern stops, or an empty string if it never does."""
    if pattern.end_date is not None:
        return f"until {pattern.end_date.isoformat()}"
    if pattern.max_occurrences is not None:
        noun = "occurrence" if pattern.max_occurrences == 1 else "occurrences"
        return f"for {pattern.max_occurrences} {noun}"
    return ""

"""Pattern validation.

Validation never raises: every violated check contributes one message to the
returned ``ValidationResult`` so a form layer can render them all at once.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from taskcadence.models.recurrence import (
    Frequency,
    RecurrencePattern,
    ValidationResult,
)

FREQUENCY_ERROR = "Frequency must be one of: " + ", ".join(Frequency.values())
INTERVAL_ERROR = "Interval must be at least 1"
DAYS_OF_WEEK_ERROR = "Days of week must be between 0 (Sunday) and 6 (Saturday)"
DAY_OF_MONTH_ERROR = "Day of month must be between 1 and 31"
MONTH_OF_YEAR_ERROR = "Month of year must be between 1 and 12"
TERMINATION_ERROR = "Cannot have both end date and max occurrences"
MAX_OCCURRENCES_ERROR = "Max occurrences must be at least 1"
CUSTOM_OFFSET_ERROR = "Custom day offset must be at least 1"


def validate_pattern(pattern: RecurrencePattern) -> ValidationResult:
    """Check a pattern's internal consistency."""
    errors: list[str] = []
    frequency = pattern.frequency

    if frequency not in Frequency.values():
        errors.append(FREQUENCY_ERROR)

    if pattern.interval < 1:
        errors.append(INTERVAL_ERROR)

    if frequency == Frequency.WEEKLY.value and pattern.days_of_week:
        if any(day < 0 or day > 6 for day in pattern.days_of_week):
            errors.append(DAYS_OF_WEEK_ERROR)

    day_of_month_used = frequency in (Frequency.MONTHLY.value, Frequency.YEARLY.value)
    if day_of_month_used and pattern.day_of_month is not None:
        if not 1 <= pattern.day_of_month <= 31:
            errors.append(DAY_OF_MONTH_ERROR)

    if frequency == Frequency.YEARLY.value and pattern.month_of_year is not None:
        if not 1 <= pattern.month_of_year <= 12:
            errors.append(MONTH_OF_YEAR_ERROR)

    if pattern.end_date is not None and pattern.max_occurrences is not None:
        errors.append(TERMINATION_ERROR)

    if pattern.max_occurrences is not None and pattern.max_occurrences < 1:
        errors.append(MAX_OCCURRENCES_ERROR)

    # Only the first custom offset is consumed by the calculator.
    if frequency == Frequency.CUSTOM.value and pattern.custom_days:
        if pattern.custom_days[0] < 1:
            errors.append(CUSTOM_OFFSET_ERROR)

    return ValidationResult(valid=not errors, errors=errors)


def parse_pattern(
    record: dict[str, Any],
) -> tuple[RecurrencePattern | None, ValidationResult]:
    """Decode a raw record and validate it.

    Structural decode failures (wrong types, missing frequency) are reported
    as validation errors instead of raised.
    """
    try:
        pattern = RecurrencePattern.from_record(record)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'pattern'}: {err['msg']}"
            for err in e.errors()
        ]
        return None, ValidationResult(valid=False, errors=errors)

    return pattern, validate_pattern(pattern)

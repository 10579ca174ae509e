"""Unit tests for pattern validation."""

from __future__ import annotations

from datetime import date

from taskcadence.models.recurrence import RecurrencePattern
from taskcadence.services.validator import (
    CUSTOM_OFFSET_ERROR,
    DAY_OF_MONTH_ERROR,
    DAYS_OF_WEEK_ERROR,
    FREQUENCY_ERROR,
    INTERVAL_ERROR,
    MAX_OCCURRENCES_ERROR,
    MONTH_OF_YEAR_ERROR,
    TERMINATION_ERROR,
    parse_pattern,
    validate_pattern,
)


def _errors(**fields) -> list[str]:
    fields.setdefault("interval", 1)
    return validate_pattern(RecurrencePattern(**fields)).errors


class TestValidatePattern:
    def test_valid_patterns(self):
        for fields in (
            {"frequency": "daily"},
            {"frequency": "weekly", "days_of_week": (0, 6)},
            {"frequency": "monthly", "day_of_month": 31},
            {"frequency": "yearly", "month_of_year": 12, "day_of_month": 25},
            {"frequency": "custom", "custom_days": (7,)},
            {"frequency": "daily", "max_occurrences": 1},
            {"frequency": "daily", "end_date": date(2025, 1, 1)},
        ):
            result = validate_pattern(RecurrencePattern(interval=1, **fields))
            assert result.valid is True, fields
            assert result.errors == []

    def test_unknown_frequency(self):
        assert _errors(frequency="hourly") == [FREQUENCY_ERROR]

    def test_interval_below_one(self):
        assert _errors(frequency="daily", interval=0) == [INTERVAL_ERROR]
        assert _errors(frequency="daily", interval=-2) == [INTERVAL_ERROR]

    def test_days_of_week_out_of_range(self):
        assert _errors(frequency="weekly", days_of_week=(1, 7)) == [DAYS_OF_WEEK_ERROR]
        assert _errors(frequency="weekly", days_of_week=(-1,)) == [DAYS_OF_WEEK_ERROR]

    def test_days_of_week_only_checked_for_weekly(self):
        assert _errors(frequency="daily", days_of_week=(9,)) == []

    def test_day_of_month_out_of_range(self):
        assert _errors(frequency="monthly", day_of_month=0) == [DAY_OF_MONTH_ERROR]
        assert _errors(frequency="monthly", day_of_month=32) == [DAY_OF_MONTH_ERROR]

    def test_day_of_month_out_of_range_for_yearly(self):
        assert _errors(frequency="yearly", month_of_year=3, day_of_month=-5) == [
            DAY_OF_MONTH_ERROR
        ]
        assert _errors(frequency="yearly", month_of_year=3, day_of_month=32) == [
            DAY_OF_MONTH_ERROR
        ]

    def test_day_of_month_ignored_for_daily(self):
        assert _errors(frequency="daily", day_of_month=40) == []

    def test_month_of_year_out_of_range(self):
        assert _errors(frequency="yearly", month_of_year=13) == [MONTH_OF_YEAR_ERROR]
        assert _errors(frequency="yearly", month_of_year=0) == [MONTH_OF_YEAR_ERROR]

    def test_end_date_and_max_occurrences_are_exclusive(self):
        errors = _errors(
            frequency="daily", end_date=date(2025, 1, 1), max_occurrences=3
        )
        assert errors == [TERMINATION_ERROR]

    def test_mutual_exclusion_alongside_other_errors(self):
        errors = _errors(
            frequency="weekly",
            interval=0,
            days_of_week=(8,),
            end_date=date(2025, 1, 1),
            max_occurrences=3,
        )
        assert TERMINATION_ERROR in errors
        assert set(errors) == {INTERVAL_ERROR, DAYS_OF_WEEK_ERROR, TERMINATION_ERROR}

    def test_max_occurrences_below_one(self):
        assert _errors(frequency="daily", max_occurrences=0) == [MAX_OCCURRENCES_ERROR]

    def test_custom_first_offset_must_advance(self):
        assert _errors(frequency="custom", custom_days=(0,)) == [CUSTOM_OFFSET_ERROR]
        assert _errors(frequency="custom", custom_days=(2, -1)) == []

    def test_result_valid_flag_matches_errors(self):
        result = validate_pattern(RecurrencePattern(frequency="nope", interval=0))
        assert result.valid is False
        assert len(result.errors) == 2


class TestParsePattern:
    def test_camel_case_record(self):
        pattern, result = parse_pattern(
            {"frequency": "weekly", "interval": 2, "daysOfWeek": [1, 3]}
        )

        assert result.valid
        assert pattern is not None
        assert pattern.days_of_week == (1, 3)

    def test_structural_errors_are_reported(self):
        pattern, result = parse_pattern({"frequency": "daily", "interval": "often"})

        assert pattern is None
        assert result.valid is False
        assert any(error.startswith("interval") for error in result.errors)

    def test_missing_frequency(self):
        pattern, result = parse_pattern({"interval": 1})

        assert pattern is None
        assert any("frequency" in error for error in result.errors)

    def test_semantic_errors_are_reported(self):
        pattern, result = parse_pattern(
            {"frequency": "daily", "endDate": "2025-01-01", "maxOccurrences": 2}
        )

        assert pattern is not None
        assert result.errors == [TERMINATION_ERROR]

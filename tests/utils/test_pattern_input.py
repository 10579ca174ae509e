"""Unit tests for reading patterns and instances from CLI input."""

from __future__ import annotations

import json
from datetime import date

import pytest

from taskcadence.exceptions import InvalidPatternError, PatternParseError
from taskcadence.utils.pattern_input import (
    load_instances,
    load_pattern,
    load_pattern_record,
    parse_date_option,
)


class TestLoadPattern:
    def test_preset_name(self):
        pattern = load_pattern("every_weekday")
        assert pattern.frequency == "weekly"
        assert pattern.days_of_week == (1, 2, 3, 4, 5)

    def test_inline_json(self):
        pattern = load_pattern('{"frequency": "monthly", "dayOfMonth": 31}')
        assert pattern.day_of_month == 31

    def test_json_file(self, tmp_path):
        path = tmp_path / "pattern.json"
        path.write_text(json.dumps({"frequency": "yearly", "monthOfYear": 2}))

        assert load_pattern(str(path)).month_of_year == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_pattern(str(tmp_path / "nope.json"))

    def test_invalid_json(self):
        with pytest.raises(PatternParseError, match="Invalid JSON"):
            load_pattern('{"frequency": ')

    def test_not_an_object(self):
        with pytest.raises(PatternParseError):
            load_pattern("[1, 2, 3]")

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            load_pattern('{"frequency": "daily", "interval": 0}')
        assert exc_info.value.errors == ["Interval must be at least 1"]

    def test_record_is_not_validated(self):
        record = load_pattern_record('{"frequency": "hourly"}')
        assert record == {"frequency": "hourly"}

    def test_preset_record(self):
        assert load_pattern_record("every_2_weeks") == {"frequency": "weekly", "interval": 2}


class TestLoadInstances:
    def test_empty(self):
        assert load_instances(None) == []

    def test_inline_list(self):
        instances = load_instances(
            '[{"dueDate": "2024-01-01", "occurrenceNumber": 1},'
            ' {"dueDate": "2024-01-08", "occurrenceNumber": 2}]'
        )
        assert [i.due_date for i in instances] == [date(2024, 1, 1), date(2024, 1, 8)]

    def test_invalid_records(self):
        with pytest.raises(PatternParseError, match="Invalid instance list"):
            load_instances('[{"occurrenceNumber": 1}]')


class TestParseDateOption:
    def test_iso_date(self):
        assert parse_date_option("2024-02-29") == date(2024, 2, 29)

    def test_default(self):
        assert parse_date_option(None, date(2024, 1, 1)) == date(2024, 1, 1)

    def test_today(self):
        assert parse_date_option(None) == date.today()

    def test_invalid(self):
        with pytest.raises(PatternParseError):
            parse_date_option("31/01/2024")

"""Unit tests for occurrence enumeration."""

from __future__ import annotations

from datetime import date, timedelta
from itertools import islice

from taskcadence.models.recurrence import GeneratedInstance, RecurrencePattern
from taskcadence.services.generator import (
    generate_range,
    iter_occurrences,
    upcoming_instances,
)

DAILY = RecurrencePattern(frequency="daily", interval=1)


class TestGenerateRange:
    def test_start_date_is_first_occurrence(self, monday):
        instances = generate_range(DAILY, monday, date(2024, 1, 5))

        assert [i.due_date for i in instances] == [
            date(2024, 1, 1),
            date(2024, 1, 2),
            date(2024, 1, 3),
            date(2024, 1, 4),
            date(2024, 1, 5),
        ]
        assert [i.occurrence_number for i in instances] == [1, 2, 3, 4, 5]
        assert all(i.is_valid for i in instances)
        assert all(isinstance(i, GeneratedInstance) for i in instances)

    def test_window_end_is_inclusive(self, monday):
        instances = generate_range(DAILY, monday, monday)
        assert [i.due_date for i in instances] == [monday]

    def test_weekly_multi_day(self, mwf_pattern, monday):
        instances = generate_range(mwf_pattern, monday, date(2024, 1, 14))
        assert [i.due_date.day for i in instances] == [1, 3, 5, 8, 10, 12]

    def test_max_occurrences_caps_count(self, monday):
        pattern = RecurrencePattern(frequency="daily", interval=1, max_occurrences=3)
        instances = generate_range(pattern, monday, date(2025, 12, 31))

        assert len(instances) == 3
        assert instances[-1].occurrence_number == 3

    def test_max_occurrences_larger_than_window(self, monday):
        pattern = RecurrencePattern(frequency="weekly", interval=1, max_occurrences=10)
        instances = generate_range(pattern, monday, date(2024, 1, 20))
        assert len(instances) == 3

    def test_end_date_stops_emission(self, monday):
        pattern = RecurrencePattern(
            frequency="daily", interval=1, end_date=date(2024, 1, 3)
        )
        instances = generate_range(pattern, monday, date(2024, 1, 31))

        assert [i.due_date for i in instances] == [
            date(2024, 1, 1),
            date(2024, 1, 2),
            date(2024, 1, 3),
        ]

    def test_end_date_between_occurrences(self, monday):
        pattern = RecurrencePattern(
            frequency="weekly", interval=1, end_date=date(2024, 1, 10)
        )
        instances = generate_range(pattern, monday, date(2024, 3, 1))
        assert [i.due_date for i in instances] == [date(2024, 1, 1), date(2024, 1, 8)]

    def test_start_after_pattern_end_date(self):
        pattern = RecurrencePattern(
            frequency="daily", interval=1, end_date=date(2024, 1, 3)
        )
        assert generate_range(pattern, date(2024, 2, 1), date(2024, 3, 1)) == []

    def test_max_instances_caps_count(self, monday):
        instances = generate_range(DAILY, monday, date(2024, 12, 31), max_instances=2)
        assert len(instances) == 2

    def test_default_cap_is_one_hundred(self, monday):
        instances = generate_range(DAILY, monday, date(2030, 1, 1))
        assert len(instances) == 100

    def test_smaller_of_both_caps_wins(self, monday):
        pattern = RecurrencePattern(frequency="daily", interval=1, max_occurrences=10)
        instances = generate_range(pattern, monday, date(2024, 12, 31), max_instances=4)
        assert len(instances) == 4

    def test_zero_max_instances(self, monday):
        assert generate_range(DAILY, monday, date(2024, 1, 5), max_instances=0) == []

    def test_start_after_window_end(self, monday):
        assert generate_range(DAILY, date(2024, 2, 1), monday) == []

    def test_monthly_clamp_sequence(self):
        pattern = RecurrencePattern(frequency="monthly", interval=1, day_of_month=31)
        instances = generate_range(pattern, date(2024, 1, 31), date(2024, 6, 30))

        assert [i.due_date for i in instances] == [
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 31),
            date(2024, 4, 30),
            date(2024, 5, 31),
            date(2024, 6, 30),
        ]

    def test_restartable(self, mwf_pattern, monday):
        first = generate_range(mwf_pattern, monday, date(2024, 2, 1))
        second = generate_range(mwf_pattern, monday, date(2024, 2, 1))
        assert first == second


class TestIterOccurrences:
    def test_open_ended_pattern_is_lazy(self, monday):
        dates = [i.due_date for i in islice(iter_occurrences(DAILY, monday), 3)]
        assert dates == [monday, monday + timedelta(days=1), monday + timedelta(days=2)]

    def test_stops_at_max_occurrences(self, monday):
        pattern = RecurrencePattern(frequency="weekly", interval=1, max_occurrences=2)
        assert len(list(iter_occurrences(pattern, monday))) == 2


class TestUpcomingInstances:
    def test_strictly_after_now(self, monday):
        assert upcoming_instances(DAILY, 3, now=monday) == [
            date(2024, 1, 2),
            date(2024, 1, 3),
            date(2024, 1, 4),
        ]

    def test_default_count(self, monday):
        assert len(upcoming_instances(DAILY, now=monday)) == 5

    def test_defaults_to_today(self):
        today = date.today()
        preview = upcoming_instances(DAILY, 1)
        assert preview[0] in (today + timedelta(days=1), today + timedelta(days=2))

    def test_weekly_preview(self, mwf_pattern, monday):
        assert upcoming_instances(mwf_pattern, 4, now=monday) == [
            date(2024, 1, 3),
            date(2024, 1, 5),
            date(2024, 1, 8),
            date(2024, 1, 10),
        ]

    def test_honours_end_date(self, monday):
        pattern = RecurrencePattern(
            frequency="daily", interval=1, end_date=date(2024, 1, 3)
        )
        assert upcoming_instances(pattern, 10, now=monday) == [
            date(2024, 1, 2),
            date(2024, 1, 3),
        ]

    def test_honours_max_occurrences(self, monday):
        pattern = RecurrencePattern(frequency="daily", interval=1, max_occurrences=2)
        assert len(upcoming_instances(pattern, 10, now=monday)) == 2

    def test_zero_count(self, monday):
        assert upcoming_instances(DAILY, 0, now=monday) == []

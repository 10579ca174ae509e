"""Next-occurrence calculation.

Every frequency is stepped with naive calendar arithmetic on local dates.
Two month-end behaviours coexist and are intentional:

* an explicit ``day_of_month`` is clamped to the last day of the target month
  (monthly Jan 31 -> Feb 29 in 2024);
* a day inherited from the anchor date rolls over into the following month
  (monthly without a day, Jan 31 -> Mar 2 in 2024).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from taskcadence.models.recurrence import RecurrencePattern
from taskcadence.models.rules import (
    CustomRule,
    DailyRule,
    MonthlyRule,
    Rule,
    WeeklyRule,
    YearlyRule,
)
from taskcadence.utils.date_utils import as_date, js_weekday, rolled_date


def next_occurrence(pattern: RecurrencePattern, from_date: date | datetime) -> date:
    """Return the occurrence that follows ``from_date``.

    Args:
        pattern: A pattern that passed ``validate_pattern``
        from_date: Anchor date; a datetime is truncated to its date

    Returns:
        The next occurrence date, always later than the anchor for valid patterns
    """
    schedule = pattern.schedule
    return step(schedule.rule, schedule.interval, as_date(from_date))


def step(rule: Rule, interval: int, anchor: date) -> date:
    """Advance one occurrence from ``anchor`` for a single rule variant."""
    if isinstance(rule, DailyRule):
        return anchor + timedelta(days=interval)
    if isinstance(rule, WeeklyRule):
        return _step_weekly(rule, interval, anchor)
    if isinstance(rule, MonthlyRule):
        return _step_monthly(rule, interval, anchor)
    if isinstance(rule, YearlyRule):
        return _step_yearly(rule, interval, anchor)
    if isinstance(rule, CustomRule):
        if rule.offsets:
            return anchor + timedelta(days=rule.offsets[0])
        return anchor + timedelta(days=interval)
    raise TypeError(f"Unsupported rule: {rule!r}")


def _step_weekly(rule: WeeklyRule, interval: int, anchor: date) -> date:
    if not rule.days_of_week:
        return anchor + timedelta(weeks=interval)

    current = js_weekday(anchor)
    later_this_week = [day for day in rule.days_of_week if day > current]
    if later_this_week:
        # Interval only applies once the selected days wrap into a new cycle.
        return anchor + timedelta(days=later_this_week[0] - current)

    first = rule.days_of_week[0]
    return anchor + timedelta(days=(7 - current) + first + 7 * (interval - 1))


def _step_monthly(rule: MonthlyRule, interval: int, anchor: date) -> date:
    if rule.day_of_month:
        # relativedelta clamps an absolute day to the end of the target month.
        return anchor + relativedelta(months=interval, day=rule.day_of_month)
    target = anchor.replace(day=1) + relativedelta(months=interval)
    return rolled_date(target.year, target.month, anchor.day)


def _step_yearly(rule: YearlyRule, interval: int, anchor: date) -> date:
    if rule.month_of_year:
        if rule.day_of_month:
            return anchor + relativedelta(
                years=interval, month=rule.month_of_year, day=rule.day_of_month
            )
        return rolled_date(anchor.year + interval, rule.month_of_year, anchor.day)
    return rolled_date(anchor.year + interval, anchor.month, anchor.day)

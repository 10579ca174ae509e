"""Enumeration of occurrences over a window or a count."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime

from taskcadence.models.recurrence import GeneratedInstance, RecurrencePattern
from taskcadence.services.calculator import next_occurrence
from taskcadence.utils.date_utils import as_date

DEFAULT_MAX_INSTANCES = 100
DEFAULT_PREVIEW_COUNT = 5


def iter_occurrences(
    pattern: RecurrencePattern, start_date: date | datetime
) -> Iterator[GeneratedInstance]:
    """Lazily yield occurrences starting at ``start_date`` itself.

    Stops only when the pattern's own termination is reached, so callers must
    bound open-ended patterns themselves.
    """
    end_date = pattern.end_date
    max_occurrences = pattern.max_occurrences
    current = as_date(start_date)
    occurrence_number = 1

    while max_occurrences is None or occurrence_number <= max_occurrences:
        if end_date is not None and current > end_date:
            return
        yield GeneratedInstance(
            due_date=current,
            occurrence_number=occurrence_number,
            is_valid=True,
        )
        current = next_occurrence(pattern, current)
        occurrence_number += 1


def generate_range(
    pattern: RecurrencePattern,
    start_date: date | datetime,
    end_date: date | datetime,
    max_instances: int = DEFAULT_MAX_INSTANCES,
) -> list[GeneratedInstance]:
    """Return every occurrence from ``start_date`` up to ``end_date`` inclusive.

    The result is capped at ``max_instances`` and at the pattern's
    ``max_occurrences``, whichever is smaller, and never passes the pattern's
    own ``end_date``.
    """
    window_end = as_date(end_date)
    limit = max_instances
    if pattern.max_occurrences is not None:
        limit = min(limit, pattern.max_occurrences)

    instances: list[GeneratedInstance] = []
    if limit <= 0:
        return instances

    for instance in iter_occurrences(pattern, start_date):
        if instance.due_date > window_end:
            break
        instances.append(instance)
        if len(instances) >= limit:
            break
    return instances


def upcoming_instances(
    pattern: RecurrencePattern,
    count: int = DEFAULT_PREVIEW_COUNT,
    now: date | datetime | None = None,
) -> list[date]:
    """Preview the next ``count`` occurrence dates strictly after ``now``.

    ``now`` defaults to today. The pattern's end date and occurrence cap are
    honoured, counting from the first previewed date.
    """
    current = as_date(now) if now is not None else date.today()
    limit = count
    if pattern.max_occurrences is not None:
        limit = min(limit, pattern.max_occurrences)

    dates: list[date] = []
    while len(dates) < limit:
        current = next_occurrence(pattern, current)
        if pattern.end_date is not None and current > pattern.end_date:
            break
        dates.append(current)
    return dates

"""Decides when a recurring task needs a new concrete instance."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any, Protocol

from taskcadence.models.recurrence import (
    RecurrencePattern,
    RecurringTaskInstance,
    create_recurring_instance,
)
from taskcadence.services.calculator import next_occurrence
from taskcadence.utils.date_utils import as_date


class HasDueDate(Protocol):
    due_date: Any


def last_instance(instances: Sequence[HasDueDate]) -> HasDueDate | None:
    """Instance with the latest due date; the first one wins on ties."""
    latest = None
    for instance in instances:
        if latest is None or as_date(instance.due_date) > as_date(latest.due_date):
            latest = instance
    return latest


def should_generate_instance(
    existing_instances: Sequence[HasDueDate],
    pattern: RecurrencePattern,
    check_date: date | datetime,
) -> bool:
    """Return True when a new instance is due on ``check_date``.

    Rules are applied in order and the first failing one wins:

    1. the occurrence cap has been reached -> False
    2. ``check_date`` is past the pattern's end date -> False
    3. nothing has been generated yet -> True
    4. otherwise, due once ``check_date`` reaches the occurrence that follows
       the latest existing instance.
    """
    check = as_date(check_date)

    if (
        pattern.max_occurrences is not None
        and len(existing_instances) >= pattern.max_occurrences
    ):
        return False

    if pattern.end_date is not None and check > pattern.end_date:
        return False

    latest = last_instance(existing_instances)
    if latest is None:
        return True

    next_due = next_occurrence(pattern, as_date(latest.due_date))
    return check >= next_due


def next_instance(
    existing_instances: Sequence[HasDueDate],
    pattern: RecurrencePattern,
    check_date: date | datetime,
    parent_task_id: Any,
) -> RecurringTaskInstance | None:
    """Build the instance to materialize on ``check_date``, or None if none is due.

    The first instance is due on ``check_date``; later ones fall on the
    occurrence after the latest existing instance.
    """
    if not should_generate_instance(existing_instances, pattern, check_date):
        return None

    latest = last_instance(existing_instances)
    if latest is None:
        due_date = as_date(check_date)
    else:
        due_date = next_occurrence(pattern, as_date(latest.due_date))

    return create_recurring_instance(
        parent_task_id=parent_task_id,
        due_date=due_date,
        occurrence_number=len(existing_instances) + 1,
    )

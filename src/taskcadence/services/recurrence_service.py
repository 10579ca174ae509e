"""Recurrence service - validated entry point over the engine functions.

The module-level functions in ``calculator``, ``generator``,
``materialization`` and ``description`` assume a pattern that already
passed validation. ``RecurrenceService`` enforces that contract, applies the
configured defaults and logs each decision.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from taskcadence.exceptions import InvalidPatternError
from taskcadence.models.config_models import EngineConfig
from taskcadence.models.recurrence import (
    GeneratedInstance,
    RecurrencePattern,
    RecurringTaskInstance,
    ValidationResult,
)
from taskcadence.services import calculator, description, generator, materialization
from taskcadence.services.materialization import HasDueDate
from taskcadence.services.validator import validate_pattern

logger = logging.getLogger(__name__)


class RecurrenceService:
    """Service for computing occurrences of recurring tasks."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()

    def validate(self, pattern: RecurrencePattern) -> ValidationResult:
        """Validate a pattern without raising."""
        result = validate_pattern(pattern)
        if not result.valid:
            logger.debug("pattern rejected: %s", "; ".join(result.errors))
        return result

    def ensure_valid(self, pattern: RecurrencePattern) -> RecurrencePattern:
        """Return the pattern unchanged, or raise InvalidPatternError."""
        result = self.validate(pattern)
        if not result.valid:
            raise InvalidPatternError(result.errors)
        return pattern

    def next_occurrence(
        self, pattern: RecurrencePattern, from_date: date | datetime
    ) -> date:
        """Next occurrence after ``from_date``."""
        self.ensure_valid(pattern)
        result = calculator.next_occurrence(pattern, from_date)
        logger.debug("next occurrence of %s after %s: %s", pattern.frequency, from_date, result)
        return result

    def generate_range(
        self,
        pattern: RecurrencePattern,
        start_date: date | datetime,
        end_date: date | datetime,
        max_instances: int | None = None,
    ) -> list[GeneratedInstance]:
        """Occurrences from ``start_date`` through ``end_date``."""
        self.ensure_valid(pattern)
        limit = max_instances if max_instances is not None else self.config.default_max_instances
        instances = generator.generate_range(pattern, start_date, end_date, limit)
        logger.debug(
            "generated %d instance(s) between %s and %s (limit %d)",
            len(instances),
            start_date,
            end_date,
            limit,
        )
        return instances

    def upcoming(
        self,
        pattern: RecurrencePattern,
        count: int | None = None,
        now: date | datetime | None = None,
    ) -> list[date]:
        """Preview upcoming occurrence dates after ``now``."""
        self.ensure_valid(pattern)
        count = count if count is not None else self.config.preview_count
        return generator.upcoming_instances(pattern, count, now)

    def should_generate(
        self,
        existing_instances: Sequence[HasDueDate],
        pattern: RecurrencePattern,
        check_date: date | datetime,
    ) -> bool:
        """Whether a new instance is due on ``check_date``."""
        self.ensure_valid(pattern)
        due = materialization.should_generate_instance(existing_instances, pattern, check_date)
        logger.debug(
            "materialization check on %s with %d existing instance(s): %s",
            check_date,
            len(existing_instances),
            "due" if due else "not due",
        )
        return due

    def materialize(
        self,
        existing_instances: Sequence[HasDueDate],
        pattern: RecurrencePattern,
        check_date: date | datetime,
        parent_task_id: Any,
    ) -> RecurringTaskInstance | None:
        """Build the instance a caller should store, or None if none is due."""
        self.ensure_valid(pattern)
        instance = materialization.next_instance(
            existing_instances, pattern, check_date, parent_task_id
        )
        if instance is not None:
            logger.info(
                "materializing occurrence %d of task %s due %s",
                instance.occurrence_number,
                parent_task_id,
                instance.due_date,
            )
        return instance

    def describe(self, pattern: RecurrencePattern) -> str:
        """Display text for a pattern, including how it terminates."""
        text = description.describe(pattern)
        termination = description.describe_termination(pattern)
        return f"{text}, {termination}" if termination else text

"""Recurrence data models."""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from taskcadence.models.rules import Schedule, schedule_from_pattern
from taskcadence.utils.date_utils import as_date


class Frequency(str, Enum):
    """Known recurrence frequencies."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class _RecordModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RecurrencePattern(_RecordModel):
    """Declarative recurrence rule attached to a task.

    The record is deliberately permissive: an unknown frequency or an
    out-of-range field can be represented so that ``validate_pattern`` can
    report it. Use ``schedule`` for the per-frequency view.

    Attributes:
        frequency: One of daily, weekly, monthly, yearly, custom
        interval: Step size in units of the frequency
        days_of_week: Weekday indices 0-6 (0 = Sunday), weekly only
        day_of_month: Day 1-31, monthly and yearly
        month_of_year: Month 1-12, yearly only
        custom_days: Day offsets from the anchor date, custom only
        end_date: Last date on which an occurrence may fall
        max_occurrences: Maximum number of generated occurrences
    """

    frequency: str
    interval: int = 1
    days_of_week: tuple[int, ...] | None = None
    day_of_month: int | None = None
    month_of_year: int | None = None
    custom_days: tuple[int, ...] | None = None
    end_date: date | None = None
    max_occurrences: int | None = None

    @field_validator("frequency", mode="before")
    @classmethod
    def _normalize_frequency(cls, value: Any) -> Any:
        if isinstance(value, Frequency):
            return value.value
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("end_date", mode="before")
    @classmethod
    def _coerce_end_date(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if isinstance(value, date | str):
            return as_date(value)
        return value

    @property
    def schedule(self) -> Schedule:
        """Tagged view of this pattern (raises InvalidPatternError on unknown frequency)."""
        return schedule_from_pattern(self)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> RecurrencePattern:
        """Build a pattern from a plain record (camelCase or snake_case keys)."""
        return cls.model_validate(record)

    def to_record(self) -> dict[str, Any]:
        """Serialize to a plain record with camelCase keys and ISO dates."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GeneratedInstance(_RecordModel):
    """One occurrence produced from a pattern.

    Attributes:
        due_date: Calendar date of the occurrence
        occurrence_number: 1-based position in the sequence
        is_valid: Whether it satisfied the rule at generation time
        reason: Optional explanation when it did not
    """

    due_date: date
    occurrence_number: int = Field(ge=1)
    is_valid: bool = True
    reason: str | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _coerce_due_date(cls, value: Any) -> Any:
        return as_date(value) if isinstance(value, date | str) else value


class RecurringTaskInstance(_RecordModel):
    """Materialized occurrence of a recurring task, owned by storage.

    Attributes:
        instance_id: Unique identifier for the instance
        parent_task_id: Opaque reference to the parent task
        due_date: Calendar date of the occurrence
        occurrence_number: 1-based position in the sequence
        generated_at: When the instance was created
        completed: Whether this occurrence was completed
        modified: Whether the user edited it independently of the pattern
    """

    instance_id: str
    parent_task_id: Any
    due_date: date
    occurrence_number: int = Field(ge=1)
    generated_at: datetime | None = None
    completed: bool = False
    modified: bool = False

    @field_validator("due_date", mode="before")
    @classmethod
    def _coerce_due_date(cls, value: Any) -> Any:
        return as_date(value) if isinstance(value, date | str) else value


class ValidationResult(BaseModel):
    """Outcome of validating a pattern."""

    valid: bool
    errors: list[str] = Field(default_factory=list)


def create_recurring_instance(
    parent_task_id: Any,
    due_date: date | datetime | str,
    occurrence_number: int,
) -> RecurringTaskInstance:
    """Create a fresh, unpersisted instance for the storage layer to save."""
    return RecurringTaskInstance(
        instance_id=f"{parent_task_id}-{uuid.uuid4().hex}",
        parent_task_id=parent_task_id,
        due_date=as_date(due_date),
        occurrence_number=occurrence_number,
        generated_at=datetime.now(UTC),
    )

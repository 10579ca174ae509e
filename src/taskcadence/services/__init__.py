"""Services module for TaskCadence - the recurrence engine."""

from .calculator import next_occurrence
from .description import describe, describe_termination, ordinal
from .generator import generate_range, iter_occurrences, upcoming_instances
from .materialization import next_instance, should_generate_instance
from .recurrence_service import RecurrenceService
from .validator import parse_pattern, validate_pattern

__all__ = [
    "RecurrenceService",
    "validate_pattern",
    "parse_pattern",
    "next_occurrence",
    "generate_range",
    "iter_occurrences",
    "upcoming_instances",
    "should_generate_instance",
    "next_instance",
    "describe",
    "describe_termination",
    "ordinal",
]

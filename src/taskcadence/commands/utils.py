"""Shared helpers for command modules."""

from taskcadence.services.config_service import get_config_service
from taskcadence.services.recurrence_service import RecurrenceService

PATTERN_HELP = "Pattern as inline JSON, a JSON file path, or a preset name"
OUTPUT_HELP = "Output format (table, json, yaml, pretty)"


def get_recurrence_service() -> RecurrenceService:
    """Build a RecurrenceService from the user's configuration."""
    return RecurrenceService(get_config_service().config)


def resolve_output(output: str | None) -> str:
    """Use the explicit --output value, else the configured default."""
    return output or get_config_service().config.output_format

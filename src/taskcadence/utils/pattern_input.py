"""Reading patterns, instances and dates from command-line input."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from taskcadence.exceptions import InvalidPatternError, PatternParseError
from taskcadence.models.presets import is_preset_name, pattern_from_preset
from taskcadence.models.recurrence import GeneratedInstance, RecurrencePattern
from taskcadence.services.validator import parse_pattern
from taskcadence.utils.date_utils import as_date

_instances_adapter = TypeAdapter(list[GeneratedInstance])


def _read_json(source: str) -> Any:
    """Decode inline JSON, or the contents of a JSON file if ``source`` is a path."""
    text = source
    if not source.lstrip().startswith(("{", "[")):
        path = Path(source).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"No such pattern file: {source}")
        text = path.read_text(encoding="utf-8")

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PatternParseError(f"Invalid JSON: {e.msg} (line {e.lineno})") from e


def load_pattern_record(source: str) -> dict[str, Any]:
    """Resolve a preset name, inline JSON object or JSON file into a raw record."""
    if is_preset_name(source):
        return pattern_from_preset(source).to_record()

    record = _read_json(source)
    if not isinstance(record, dict):
        raise PatternParseError("A pattern must be a JSON object")
    return record


def load_pattern(source: str) -> RecurrencePattern:
    """Load a pattern and reject it unless it validates.

    Raises:
        PatternParseError: If the input is not a JSON object
        InvalidPatternError: If the record decodes but fails validation
        FileNotFoundError: If a referenced file does not exist
    """
    pattern, result = parse_pattern(load_pattern_record(source))
    if pattern is None or not result.valid:
        raise InvalidPatternError(result.errors)
    return pattern


def load_instances(source: str | None) -> list[GeneratedInstance]:
    """Load previously generated instances from a JSON list (inline or file)."""
    if not source:
        return []

    records = _read_json(source)
    try:
        return _instances_adapter.validate_python(records)
    except ValidationError as e:
        raise PatternParseError(f"Invalid instance list: {e.error_count()} error(s)") from e


def parse_date_option(value: str | None, default: date | None = None) -> date:
    """Parse an ISO date option, falling back to ``default`` or today."""
    if value is None:
        return default or date.today()
    try:
        return as_date(value)
    except ValueError as e:
        raise PatternParseError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from e

"""TaskCadence domain models.

Pydantic models for recurrence patterns and the instances generated from
them, the tagged rule view used by the calculator, and the preset tables.
"""

from .config_models import EngineConfig
from .presets import (
    DAY_NAMES,
    DAY_NAMES_FULL,
    FREQUENCY_LABELS,
    MONTH_NAMES,
    MONTH_NAMES_FULL,
    PRESET_LABELS,
    RecurrencePreset,
    default_pattern,
    pattern_from_preset,
    patterns_equal,
)
from .recurrence import (
    Frequency,
    GeneratedInstance,
    RecurrencePattern,
    RecurringTaskInstance,
    ValidationResult,
    create_recurring_instance,
)
from .rules import (
    CustomRule,
    DailyRule,
    MonthlyRule,
    Schedule,
    Termination,
    WeeklyRule,
    YearlyRule,
)

__all__ = [
    # Pattern models
    "Frequency",
    "RecurrencePattern",
    "ValidationResult",
    # Instance models
    "GeneratedInstance",
    "RecurringTaskInstance",
    "create_recurring_instance",
    # Rule variants
    "Schedule",
    "Termination",
    "DailyRule",
    "WeeklyRule",
    "MonthlyRule",
    "YearlyRule",
    "CustomRule",
    # Presets
    "RecurrencePreset",
    "PRESET_LABELS",
    "FREQUENCY_LABELS",
    "DAY_NAMES",
    "DAY_NAMES_FULL",
    "MONTH_NAMES",
    "MONTH_NAMES_FULL",
    "default_pattern",
    "pattern_from_preset",
    "patterns_equal",
    # Config
    "EngineConfig",
]

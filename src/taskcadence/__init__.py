"""TaskCadence - recurrence engine for recurring tasks."""

__version__ = "0.1.0"

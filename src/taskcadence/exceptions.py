"""Custom exceptions for TaskCadence."""


class TaskCadenceError(Exception):
    """Base exception for all TaskCadence errors."""


class InvalidPatternError(TaskCadenceError):
    """Raised when a computation is requested for a pattern that fails validation."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors) or "Invalid recurrence pattern")
        self.errors = errors


class PatternParseError(TaskCadenceError):
    """Raised when a pattern or instance file cannot be read or decoded."""

"""Configuration models for TaskCadence."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

OutputFormat = Literal["table", "json", "yaml", "pretty"]


class EngineConfig(BaseModel):
    """User-level settings for the recurrence engine and CLI."""

    default_max_instances: int = Field(
        default=100, ge=1, description="Cap on instances returned by range queries"
    )
    preview_count: int = Field(
        default=5, ge=1, description="Number of upcoming occurrences to preview"
    )
    output_format: OutputFormat = Field(default="table")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

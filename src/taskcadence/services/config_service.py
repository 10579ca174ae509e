"""Configuration service for managing TaskCadence settings.

Settings live in ``config.json`` under the platform user config directory and
are loaded into an ``EngineConfig`` on first access.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from taskcadence.models.config_models import EngineConfig

_APP_NAME = "taskcadence"


class ConfigService:
    """Load, update and persist the engine configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: EngineConfig | None = None

    @property
    def config(self) -> EngineConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> EngineConfig:
        """Load configuration from disk, creating defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = EngineConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = EngineConfig()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Write the current configuration to disk."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Return a single setting, or None if the key is unknown."""
        return self.config.model_dump().get(key)

    def set(self, key: str, value: Any) -> EngineConfig:
        """Update one setting, re-validating the whole configuration.

        Raises:
            KeyError: If the key is not a known setting
            ValueError: If the value does not validate
        """
        if key not in EngineConfig.model_fields:
            raise KeyError(key)

        data = self.config.model_dump()
        data[key] = value
        try:
            self._config = EngineConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {value}") from e
        self.save_config()
        return self._config

    def reset_config(self) -> EngineConfig:
        """Reset configuration to defaults."""
        self._config = EngineConfig()
        self.save_config()
        return self._config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service

"""Tests for configuration management."""

from __future__ import annotations

import json

import pytest

from taskcadence.models.config_models import EngineConfig
from taskcadence.services.config_service import ConfigService, get_config_service


class TestConfigService:
    def test_first_load_writes_defaults(self, isolated_dirs):
        svc = ConfigService()

        assert svc.config == EngineConfig()
        saved = json.loads((isolated_dirs / "config.json").read_text())
        assert saved["default_max_instances"] == 100
        assert saved["preview_count"] == 5

    def test_set_persists(self, isolated_dirs):
        ConfigService().set("preview_count", 8)

        reloaded = ConfigService()
        assert reloaded.config.preview_count == 8
        assert reloaded.get("preview_count") == 8

    def test_set_unknown_key(self):
        with pytest.raises(KeyError):
            ConfigService().set("colour", "blue")

    def test_set_invalid_value(self):
        svc = ConfigService()
        with pytest.raises(ValueError):
            svc.set("preview_count", 0)
        assert svc.config.preview_count == 5

    def test_get_unknown_key(self):
        assert ConfigService().get("missing") is None

    def test_log_level_normalized(self):
        assert ConfigService().set("log_level", "debug").log_level == "DEBUG"

    def test_reset(self):
        svc = ConfigService()
        svc.set("output_format", "json")

        assert svc.reset_config() == EngineConfig()
        assert ConfigService().config.output_format == "table"

    def test_corrupt_file(self, isolated_dirs):
        (isolated_dirs / "config.json").write_text("{not json")
        with pytest.raises(RuntimeError, match="Failed to load config"):
            ConfigService().load_config()

    def test_get_config_service_is_cached(self):
        assert get_config_service() is get_config_service()

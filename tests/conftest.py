"""Shared test fixtures and configuration.

Keeps config and log files out of the real user directories.
"""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from taskcadence.models.recurrence import RecurrencePattern


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs at *tmp_path* and reset cached singletons."""
    import taskcadence.utils.logger as logger_mod
    from taskcadence.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("taskcadence").handlers.clear()

    with patch("taskcadence.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("taskcadence.utils.logger.user_log_dir", return_value=tmpdir):
            yield tmp_path

    get_config_service.cache_clear()
    for handler in logging.getLogger("taskcadence").handlers:
        handler.close()
    logging.getLogger("taskcadence").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def monday() -> date:
    """2024-01-01 is a Monday."""
    return date(2024, 1, 1)


@pytest.fixture()
def mwf_pattern() -> RecurrencePattern:
    return RecurrencePattern(frequency="weekly", interval=1, days_of_week=(1, 3, 5))

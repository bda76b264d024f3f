from __future__ import annotations

import logging

from lrucache.core.config.loader import LoggingSettings
from lrucache.core.logging.setup import configure_logging


def test_configure_logging_is_idempotent(tmp_path) -> None:
    logger = logging.getLogger("lrucache")
    logger.handlers = []

    configure_logging(tmp_path)
    first_count = len(logger.handlers)

    configure_logging(tmp_path)
    assert len(logger.handlers) == first_count == 1


def test_env_level_overrides_settings(monkeypatch) -> None:
    monkeypatch.setenv("LRUCACHE_LOG_LEVEL", "warning")

    logger = configure_logging(settings=LoggingSettings(level="debug"))

    assert logger.level == logging.WARNING


def test_settings_level_used_without_env() -> None:
    logger = configure_logging(settings=LoggingSettings(level="debug"))

    assert logger.level == logging.DEBUG
    assert logger.propagate is False

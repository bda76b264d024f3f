from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from .json_formatter import JSONFormatter

if TYPE_CHECKING:
    from lrucache.core.config.loader import LoggingSettings

_LOGGER_NAME = "lrucache"
_CONFIGURED_ATTR = "_lrucache_json_logging"


def _parse_level(raw: str) -> int:
    normalized = raw.strip().upper()
    level = getattr(logging, normalized, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _is_on(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().casefold() == "on"


def configure_logging(state_dir: Path | None = None, settings: LoggingSettings | None = None) -> logging.Logger:
    """
    Attach JSON handlers to the ``lrucache`` logger.

    Environment variables override ``settings``. Calling this again never
    duplicates handlers.
    """
    default_level = settings.level if settings is not None else "INFO"
    default_to_file = "on" if settings is not None and settings.to_file else "off"

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(_parse_level(os.getenv("LRUCACHE_LOG_LEVEL", default_level)))
    logger.propagate = False

    formatter = JSONFormatter()

    if not any(
        getattr(handler, _CONFIGURED_ATTR, False) and not isinstance(handler, RotatingFileHandler)
        for handler in logger.handlers
    ):
        stdout_handler = logging.StreamHandler(stream=sys.stdout)
        stdout_handler.setFormatter(formatter)
        setattr(stdout_handler, _CONFIGURED_ATTR, True)
        logger.addHandler(stdout_handler)

    if _is_on("LRUCACHE_LOG_TO_FILE", default_to_file):
        configured_dir = os.getenv("LRUCACHE_LOG_DIR") or (settings.log_dir if settings is not None else None)
        if configured_dir:
            log_dir = Path(configured_dir)
        elif state_dir is not None:
            log_dir = state_dir / "logs"
        else:
            raise ValueError("file logging needs LRUCACHE_LOG_DIR, settings.log_dir or a state_dir")
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "lrucache.log"
        max_bytes = int(os.getenv("LRUCACHE_LOG_MAX_BYTES", "5000000"))
        backup_count = int(os.getenv("LRUCACHE_LOG_BACKUP_COUNT", "5"))

        file_exists = any(
            isinstance(handler, RotatingFileHandler)
            and getattr(handler, _CONFIGURED_ATTR, False)
            and Path(handler.baseFilename) == log_path.absolute()
            for handler in logger.handlers
        )
        if not file_exists:
            file_handler = RotatingFileHandler(
                filename=log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            setattr(file_handler, _CONFIGURED_ATTR, True)
            logger.addHandler(file_handler)

    return logger

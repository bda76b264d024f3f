from __future__ import annotations

"""Configuration loader for LRU caches."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class CacheSettings(BaseModel):
    name: str = "default"
    capacity: int = Field(gt=0)
    check_invariants: bool = False

    @field_validator("capacity", mode="before")
    @classmethod
    def _reject_bool_capacity(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("capacity must be an integer, not a boolean")
        return value


_LEVEL_NAMES = frozenset(
    logging.getLevelName(level) for level in (logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG, logging.NOTSET)
) | {"FATAL", "WARN"}


class LoggingSettings(BaseModel):
    level: str = "INFO"
    to_file: bool = False
    log_dir: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LEVEL_NAMES:
            raise ValueError(f"unknown logging level {value!r}")
        return normalized


class LRUCacheConfig(BaseModel):
    caches: list[CacheSettings] = Field(default_factory=list)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @model_validator(mode="after")
    def _unique_names(self) -> "LRUCacheConfig":
        names = [cache.name for cache in self.caches]
        if len(names) != len(set(names)):
            raise ValueError("cache names must be unique")
        return self

    def cache(self, name: str) -> CacheSettings:
        for settings in self.caches:
            if settings.name == name:
                return settings
        raise KeyError(name)


def load_config(path: Optional[str] = None) -> LRUCacheConfig:
    """Load and validate configuration from a YAML file."""
    raw_path = path or os.getenv("LRUCACHE_CONFIG")
    if not raw_path:
        raise FileNotFoundError("no config path given and LRUCACHE_CONFIG is unset")
    cfg_path = Path(raw_path)
    with cfg_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return LRUCacheConfig.model_validate(data)


def settings_from_env(prefix: str = "LRUCACHE_CACHE") -> CacheSettings:
    raw_capacity = os.getenv(f"{prefix}_CAPACITY")
    if raw_capacity is None:
        raise KeyError(f"{prefix}_CAPACITY")
    return CacheSettings.model_validate(
        {
            "name": os.getenv(f"{prefix}_NAME", "default"),
            "capacity": raw_capacity.strip(),
            "check_invariants": os.getenv(f"{prefix}_CHECK_INVARIANTS", "off").strip().casefold() == "on",
        }
    )

from .loader import CacheSettings, LoggingSettings, LRUCacheConfig, load_config, settings_from_env

__all__ = ["CacheSettings", "LoggingSettings", "LRUCacheConfig", "load_config", "settings_from_env"]

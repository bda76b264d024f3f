from lrucache.core.cache import MISS, CacheInvariantError, CacheStats, InvalidCapacity, LRUCache, LRUCacheError

__all__ = ["LRUCache", "MISS", "CacheStats", "LRUCacheError", "InvalidCapacity", "CacheInvariantError"]

from .entry import Entry
from .errors import CacheInvariantError, InvalidCapacity, LRUCacheError
from .index import KeyIndex
from .lru import MISS, CacheStats, LRUCache
from .recency import RecencyList

__all__ = [
    "LRUCache",
    "MISS",
    "CacheStats",
    "Entry",
    "KeyIndex",
    "RecencyList",
    "LRUCacheError",
    "InvalidCapacity",
    "CacheInvariantError",
]

from __future__ import annotations


class LRUCacheError(RuntimeError):
    """Base error for LRU cache operations."""


class InvalidCapacity(LRUCacheError, ValueError):
    def __init__(self, capacity: object) -> None:
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity


class CacheInvariantError(LRUCacheError, AssertionError):
    """Raised when the index and the recency list disagree."""

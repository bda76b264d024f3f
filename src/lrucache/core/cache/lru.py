from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from .entry import Entry, _Sentinel
from .errors import CacheInvariantError, InvalidCapacity
from .index import KeyIndex
from .recency import RecencyList

if TYPE_CHECKING:
    from lrucache.core.config.loader import CacheSettings

logger = logging.getLogger("lrucache.cache")


class _Miss:
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISS"

    def __reduce__(self) -> str:
        return "MISS"


MISS: Final = _Miss()


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int

    @property
    def hit_ratio(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class LRUCache:
    """
    Fixed-capacity cache that evicts the least recently used key.

    ``get`` and ``put`` both count as a use. Lookups go through a key index
    and ordering lives in a sentinel-bounded recency list; every mutating
    path updates both together. The cache does no locking of its own, so
    callers sharing one instance across threads must serialize each call.

    ``get`` returns the ``MISS`` singleton for absent keys, which keeps
    stored ``None``/``0``/``False`` values distinguishable from a miss.
    """

    def __init__(self, capacity: int, *, name: str = "default", check_invariants: bool = False) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacity(capacity)
        self._capacity = capacity
        self.name = name
        self._check = check_invariants
        self._index: KeyIndex[Hashable] = KeyIndex()
        self._recency = RecencyList()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.debug(
            "lru_cache_created",
            extra={"extra_fields": {"cache_name": name, "capacity": capacity}},
        )

    @classmethod
    def from_settings(cls, settings: CacheSettings) -> "LRUCache":
        return cls(settings.capacity, name=settings.name, check_invariants=settings.check_invariants)

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable) -> Any:
        entry = self._index.lookup(key)
        if entry is None:
            self._misses += 1
            return MISS
        self._hits += 1
        self._recency.move_to_most_recent(entry)
        if self._check:
            self.check_invariants()
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        entry = self._index.lookup(key)
        if entry is not None:
            entry.value = value
            self._recency.move_to_most_recent(entry)
        else:
            if len(self._index) >= self._capacity:
                self._evict()
            entry = Entry(key, value)
            self._recency.insert_most_recent(entry)
            self._index.insert(key, entry)
        if self._check:
            self.check_invariants()

    def peek(self, key: Hashable) -> Any:
        """Return the cached value without marking the key as used."""
        entry = self._index.lookup(key)
        return MISS if entry is None else entry.value

    def get_or_set(self, key: Hashable, fn: Callable[[], Any]) -> Any:
        value = self.get(key)
        if value is not MISS:
            return value
        value = fn()
        self.put(key, value)
        return value

    def keys(self) -> list[Hashable]:
        """Cached keys, most recently used first."""
        return [entry.key for entry in self._recency]

    def items(self) -> list[tuple[Hashable, Any]]:
        return [(entry.key, entry.value) for entry in self._recency]

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            size=len(self._index),
            capacity=self._capacity,
        )

    def check_invariants(self) -> None:
        """Walk the recency list from both ends and cross-check the index."""
        forward = 0
        link = self._recency.head
        while link is not self._recency.tail:
            nxt = link.next
            if nxt is None or nxt.prev is not link:
                self._fail(f"broken forward link after {link!r}")
            if not isinstance(nxt, _Sentinel):
                forward += 1
                if self._index.lookup(nxt.key) is not nxt:
                    self._fail(f"{nxt!r} is not the indexed entry for its key")
                if forward > self._capacity:
                    self._fail("recency list is longer than capacity")
            link = nxt

        backward = sum(1 for _ in reversed(self._recency))
        size = len(self._index)
        if not forward == backward == len(self._recency) == size:
            self._fail(
                f"size mismatch: forward={forward} backward={backward} "
                f"list={len(self._recency)} index={size}"
            )
        if self._recency.head.prev is not None or self._recency.tail.next is not None:
            self._fail("sentinel linked outside the list")

    def _evict(self) -> None:
        try:
            victim = self._recency.least_recent()
            if victim is None:
                raise CacheInvariantError("eviction requested on an empty recency list")
            # Index first: a failed removal leaves both structures untouched.
            self._index.remove(victim.key)
            self._recency.detach(victim)
        except CacheInvariantError:
            logger.exception(
                "lru_evict_failed",
                extra={"extra_fields": {"cache_name": self.name, "size": len(self._index)}},
            )
            raise
        self._evictions += 1
        logger.debug(
            "lru_evicted",
            extra={
                "extra_fields": {
                    "cache_name": self.name,
                    "evicted_key": repr(victim.key),
                    "capacity": self._capacity,
                }
            },
        )

    def _fail(self, message: str) -> None:
        logger.error("lru_invariant_violated", extra={"extra_fields": {"cache_name": self.name, "detail": message}})
        raise CacheInvariantError(message)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"LRUCache(name={self.name!r}, size={len(self._index)}, capacity={self._capacity})"

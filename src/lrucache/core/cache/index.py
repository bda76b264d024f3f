from __future__ import annotations

from typing import Any, Generic, TypeVar

from .entry import Entry
from .errors import CacheInvariantError

K = TypeVar("K")


class KeyIndex(Generic[K]):
    """Key to entry table. Owns the entries; carries no ordering."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[K, Entry[K, Any]] = {}

    def lookup(self, key: K) -> Entry[K, Any] | None:
        return self._entries.get(key)

    def insert(self, key: K, entry: Entry[K, Any]) -> None:
        if key in self._entries:
            raise CacheInvariantError(f"key {key!r} is already indexed")
        self._entries[key] = entry

    def remove(self, key: K) -> Entry[K, Any]:
        try:
            return self._entries.pop(key)
        except KeyError:
            raise CacheInvariantError(f"key {key!r} is not indexed") from None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

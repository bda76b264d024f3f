from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .entry import Entry, _Link, _Sentinel
from .errors import CacheInvariantError


class RecencyList:
    """
    Doubly linked list of entries ordered most-recent first.

    The head and tail sentinels live for the whole lifetime of the list, so
    splicing next to them never needs a boundary check.
    """

    __slots__ = ("head", "tail", "_size")

    def __init__(self) -> None:
        self.head = _Sentinel("head")
        self.tail = _Sentinel("tail")
        self.head.next = self.tail
        self.tail.prev = self.head
        self._size = 0

    def detach(self, entry: Entry[Any, Any]) -> None:
        """Unlink an entry from its neighbours, wherever it sits."""
        if not entry.linked:
            raise CacheInvariantError(f"cannot detach unlinked {entry!r}")
        prev_link = entry.prev
        next_link = entry.next
        prev_link.next = next_link
        next_link.prev = prev_link
        entry.prev = None
        entry.next = None
        self._size -= 1

    def insert_most_recent(self, entry: Entry[Any, Any]) -> None:
        """Splice an unlinked entry directly after the head sentinel."""
        if entry.prev is not None or entry.next is not None:
            raise CacheInvariantError(f"{entry!r} is already linked")
        first = self.head.next
        entry.prev = self.head
        entry.next = first
        first.prev = entry
        self.head.next = entry
        self._size += 1

    def move_to_most_recent(self, entry: Entry[Any, Any]) -> None:
        if self.head.next is entry:
            return
        self.detach(entry)
        self.insert_most_recent(entry)

    def evict_least_recent(self) -> Entry[Any, Any]:
        """Detach and return the entry just before the tail sentinel."""
        last = self.tail.prev
        if isinstance(last, _Sentinel):
            raise CacheInvariantError("eviction requested on an empty recency list")
        self.detach(last)
        return last

    def most_recent(self) -> Entry[Any, Any] | None:
        first = self.head.next
        return None if isinstance(first, _Sentinel) else first

    def least_recent(self) -> Entry[Any, Any] | None:
        last = self.tail.prev
        return None if isinstance(last, _Sentinel) else last

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Entry[Any, Any]]:
        link: _Link | None = self.head.next
        while link is not None and link is not self.tail:
            yield link
            link = link.next

    def __reversed__(self) -> Iterator[Entry[Any, Any]]:
        link: _Link | None = self.tail.prev
        while link is not None and link is not self.head:
            yield link
            link = link.prev

from __future__ import annotations

from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _Link:
    __slots__ = ("prev", "next")

    def __init__(self) -> None:
        self.prev: _Link | None = None
        self.next: _Link | None = None


class _Sentinel(_Link):
    """Boundary marker of a recency list. Holds no key or value."""

    __slots__ = ("label",)

    def __init__(self, label: str) -> None:
        super().__init__()
        self.label = label

    def __repr__(self) -> str:
        return f"<sentinel {self.label}>"


class Entry(_Link, Generic[K, V]):
    """One cached key/value pair. Links describe position only."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        super().__init__()
        self.key = key
        self.value = value

    @property
    def linked(self) -> bool:
        return self.prev is not None and self.next is not None

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, value={self.value!r})"

from __future__ import annotations

import pytest

from lrucache import MISS, InvalidCapacity, LRUCache


def test_get_after_touch_protects_key_from_eviction() -> None:
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1

    cache.put(3, 3)

    assert cache.get(2) is MISS
    assert cache.get(1) == 1
    assert cache.get(3) == 3


def test_capacity_one_keeps_only_latest_key() -> None:
    cache = LRUCache(1)
    cache.put(1, 1)
    cache.put(2, 2)

    assert cache.get(1) is MISS
    assert cache.get(2) == 2
    assert len(cache) == 1


@pytest.mark.parametrize("capacity", [0, -1, -100])
def test_non_positive_capacity_is_rejected(capacity: int) -> None:
    with pytest.raises(InvalidCapacity) as excinfo:
        LRUCache(capacity)
    assert excinfo.value.capacity == capacity


@pytest.mark.parametrize("capacity", [True, 2.0, "3", None])
def test_non_integer_capacity_is_rejected(capacity: object) -> None:
    with pytest.raises(InvalidCapacity):
        LRUCache(capacity)  # type: ignore[arg-type]


def test_invalid_capacity_is_also_a_value_error() -> None:
    with pytest.raises(ValueError):
        LRUCache(0)


def test_mixed_sequence_with_two_evictions() -> None:
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) is MISS
    cache.put(4, 4)
    assert cache.get(1) is MISS
    assert cache.get(3) == 3
    assert cache.get(4) == 4

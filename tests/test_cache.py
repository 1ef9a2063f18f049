"""Tests for PathCache."""

import pytest

from dagpath.cache import PathCache
from dagpath.model import Vertex


def test_store_and_get():
    cache = PathCache()
    v = Vertex("a")
    assert cache.get(v) is None
    assert v not in cache
    assert cache.store(v, 0) == 0
    assert cache.get(v) == 0
    assert v in cache
    assert len(cache) == 1


def test_store_is_first_write_wins():
    cache = PathCache()
    cache.store(Vertex(1), 3)
    assert cache.store(Vertex(1), 5) == 3
    assert cache.snapshot() == {1: 3}


def test_negative_length_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        PathCache().store(Vertex(1), -1)


def test_clear_and_snapshot_copy():
    cache = PathCache()
    cache.store(Vertex(1), 1)
    snap = cache.snapshot()
    snap[2] = 9
    assert cache.snapshot() == {1: 1}
    cache.clear()
    assert len(cache) == 0
    assert repr(cache) == "PathCache(size=0)"

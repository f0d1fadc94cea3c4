"""Tests for the directed path traffic cache."""

import logging

from traffic_engine.path_cache import NO_PARENT, PathTrafficCache


def test_miss_returns_none():
    cache = PathTrafficCache()

    assert cache.get(1, 5) is None
    assert len(cache) == 0


def test_zero_traffic_is_a_hit():
    cache = PathTrafficCache()
    cache.put(1, 5, 0)

    assert cache.get(1, 5) == 0
    assert (1, 5) in cache


def test_directions_are_distinct_entries():
    cache = PathTrafficCache()
    cache.put(1, 5, 9)
    cache.put(5, 1, 4)
    cache.put(5, NO_PARENT, 10)

    assert cache.get(1, 5) == 9
    assert cache.get(5, 1) == 4
    assert cache.get(5, NO_PARENT) == 10
    assert len(cache) == 3


def test_overwrite_is_logged(caplog):
    cache = PathTrafficCache()
    cache.put(2, 5, 13)

    with caplog.at_level(logging.WARNING, logger="traffic_engine.path_cache"):
        cache.put(2, 5, 14)

    assert cache.get(2, 5) == 14
    assert "Overwriting cached traffic" in caplog.text


def test_clear():
    cache = PathTrafficCache()
    cache.put(1, 2, 3)
    cache.clear()

    assert cache.get(1, 2) is None
    assert repr(cache) == "PathTrafficCache(entries=0)"

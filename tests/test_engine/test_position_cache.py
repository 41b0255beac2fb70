"""Tests for the named position cache."""

import pytest

from sequencer.engine.position_cache import NamedPositionCache
from sequencer.errors import UnresolvedNameError
from sequencer.models.locations import Point


def test_record_and_lookup():
    cache = NamedPositionCache()
    cache.record("n", 0, Point(x=12.5, y=-3))
    assert cache.lookup("n", 0) == Point(x=12.5, y=-3)
    assert ("n", 0) in cache


def test_lookup_is_per_repetition():
    cache = NamedPositionCache()
    cache.record("n", 0, Point(x=1, y=1))
    with pytest.raises(UnresolvedNameError) as exc:
        cache.lookup("n", 1)
    assert exc.value.name == "n"
    assert exc.value.repetition == 1
    assert "repetition 1" in str(exc.value)


def test_unresolved_name_is_a_key_error():
    with pytest.raises(KeyError):
        NamedPositionCache().lookup("ghost", 0)


def test_rerecord_overwrites():
    cache = NamedPositionCache()
    cache.record("n", 0, Point(x=1, y=1))
    cache.record("n", 0, Point(x=2, y=2))
    assert cache.lookup("n", 0) == Point(x=2, y=2)
    assert len(cache) == 1


def test_recorded_point_is_isolated_from_caller():
    cache = NamedPositionCache()
    p = Point(x=1, y=1)
    cache.record("n", 0, p)
    p.x = 99
    looked_up = cache.lookup("n", 0)
    looked_up.y = 42
    assert cache.lookup("n", 0) == Point(x=1, y=1)

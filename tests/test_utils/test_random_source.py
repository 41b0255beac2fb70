"""Tests for random sources."""

import pytest

from sequencer.utils.random_source import NumpyRandomSource, RandomSource, random_element
from tests.conftest import ScriptedRandom


def test_numpy_source_satisfies_protocol():
    assert isinstance(NumpyRandomSource(1), RandomSource)


def test_same_seed_same_draws():
    a = NumpyRandomSource(42)
    b = NumpyRandomSource(42)
    draws_a = [a.uniform_float(0, 10) for _ in range(20)] + [a.uniform_bool() for _ in range(20)]
    draws_b = [b.uniform_float(0, 10) for _ in range(20)] + [b.uniform_bool() for _ in range(20)]
    assert draws_a == draws_b


def test_uniform_float_in_range():
    rng = NumpyRandomSource(0)
    for _ in range(1000):
        v = rng.uniform_float(-2.5, 4.0)
        assert -2.5 <= v <= 4.0


def test_uniform_bool_is_bool():
    rng = NumpyRandomSource(0)
    values = {rng.uniform_bool() for _ in range(200)}
    assert values == {True, False}


def test_random_element_bounds():
    items = ["a", "b", "c"]
    assert random_element(ScriptedRandom(fraction=0.0), items) == "a"
    assert random_element(ScriptedRandom(fraction=0.5), items) == "b"
    # hi is inclusive, the top of the range still maps to the last item
    assert random_element(ScriptedRandom(fraction=1.0), items) == "c"


def test_random_element_empty():
    with pytest.raises(ValueError):
        random_element(ScriptedRandom(), [])

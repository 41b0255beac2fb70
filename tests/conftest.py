"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sequencer.engine.asset_cache import AssetDimensionCache
from sequencer.engine.pipeline import Pipeline
from sequencer.engine.position_cache import NamedPositionCache
from sequencer.errors import AssetMeasurementError
from sequencer.models.descriptor import AssetDimensions


class ScriptedRandom:
    """RandomSource with predictable draws.

    uniform_float returns lo + (hi - lo) * fraction; uniform_bool cycles
    through ``flips``. Every call is logged for draw-order assertions.
    """

    def __init__(self, fraction: float = 0.0, flips: tuple[bool, ...] = (False,)) -> None:
        self.fraction = fraction
        self.flips = list(flips)
        self.float_calls: list[tuple[float, float]] = []
        self.bool_calls = 0

    def uniform_float(self, lo: float, hi: float) -> float:
        self.float_calls.append((lo, hi))
        return lo + (hi - lo) * self.fraction

    def uniform_bool(self) -> bool:
        value = self.flips[self.bool_calls % len(self.flips)]
        self.bool_calls += 1
        return value


class FakeProbe:
    """Async asset probe backed by a dict; unknown paths fail like a real probe."""

    def __init__(self, dims: dict[str, tuple[int, int]] | None = None) -> None:
        self.dims = dims or {}
        self.calls: list[str] = []

    async def __call__(self, path: str) -> AssetDimensions:
        self.calls.append(path)
        if path not in self.dims:
            raise AssetMeasurementError(path, "not found")
        x, y = self.dims[path]
        return AssetDimensions(x=x, y=y)


@pytest.fixture
def probe() -> FakeProbe:
    return FakeProbe({"beam.webm": (200, 100), "bolt.webm": (1000, 400)})


@pytest.fixture
def assets(probe: FakeProbe) -> AssetDimensionCache:
    return AssetDimensionCache(probe)


@pytest.fixture
def positions() -> NamedPositionCache:
    return NamedPositionCache()


@pytest.fixture
def pipeline() -> Pipeline:
    return Pipeline(scene_grid_size=100.0)

"""Tests for the per-sequence asset dimension cache."""

import pytest

from sequencer.engine.asset_cache import AssetDimensionCache
from sequencer.errors import AssetMeasurementError
from sequencer.models.descriptor import AssetDimensions
from tests.conftest import FakeProbe


@pytest.mark.asyncio
async def test_structured_name_skips_probe():
    probe = FakeProbe()
    cache = AssetDimensionCache(probe)
    dims = await cache.fetch("fire_200x150.ext", structured=True)
    assert dims == AssetDimensions(x=200, y=150)
    assert probe.calls == []
    assert cache.probe_calls == 0


@pytest.mark.asyncio
async def test_unparseable_structured_name_falls_through_to_probe():
    probe = FakeProbe({"fire_abcxdef.ext": (10, 20)})
    cache = AssetDimensionCache(probe)
    dims = await cache.fetch("fire_abcxdef.ext", structured=True)
    assert dims == AssetDimensions(x=10, y=20)
    assert probe.calls == ["fire_abcxdef.ext"]


@pytest.mark.asyncio
async def test_signed_structured_dimensions_are_measured_instead():
    probe = FakeProbe({"fire_-200x150.webm": (400, 150)})
    cache = AssetDimensionCache(probe)
    dims = await cache.fetch("fire_-200x150.webm", structured=True)
    assert dims == AssetDimensions(x=400, y=150)
    assert probe.calls == ["fire_-200x150.webm"]

@pytest.mark.asyncio
async def test_structured_names_ignored_outside_structured_mode():
    probe = FakeProbe({"fire_200x150.ext": (300, 300)})
    cache = AssetDimensionCache(probe)
    dims = await cache.fetch("fire_200x150.ext")
    assert dims == AssetDimensions(x=300, y=300)
    assert probe.calls == ["fire_200x150.ext"]


@pytest.mark.asyncio
async def test_probe_only_on_miss():
    probe = FakeProbe({"beam.webm": (200, 100)})
    cache = AssetDimensionCache(probe)
    first = await cache.fetch("beam.webm")
    second = await cache.fetch("beam.webm")
    assert first == second
    assert probe.calls == ["beam.webm"]
    assert "beam.webm" in cache
    assert len(cache) == 1


def test_get_put():
    cache = AssetDimensionCache(FakeProbe())
    assert cache.get("a.webm") is None
    cache.put("a.webm", AssetDimensions(x=1, y=2))
    assert cache.get("a.webm") == AssetDimensions(x=1, y=2)


@pytest.mark.asyncio
async def test_probe_failure_propagates_and_is_not_cached():
    probe = FakeProbe()
    cache = AssetDimensionCache(probe)
    with pytest.raises(AssetMeasurementError):
        await cache.fetch("missing.webm")
    assert "missing.webm" not in cache

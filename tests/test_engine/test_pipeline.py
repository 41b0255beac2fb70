"""Tests for the pipeline orchestrator."""

import pytest

from sequencer.engine.asset_cache import AssetDimensionCache
from sequencer.engine.context import PipelineContext
from sequencer.engine.config import PipelineConfig
from sequencer.engine.pipeline import Pipeline, create_pipeline
from sequencer.engine.position_cache import NamedPositionCache
from sequencer.engine.registry import Stage, StepRegistry, StepSpec
from sequencer.models.effect import EffectOptions
from tests.conftest import FakeProbe, ScriptedRandom


def _ctx() -> PipelineContext:
    return PipelineContext(
        options=EffectOptions(file="a.webm"),
        repetition=0,
        rng=ScriptedRandom(),
        positions=NamedPositionCache(),
        assets=AssetDimensionCache(FakeProbe()),
    )


@pytest.mark.asyncio
async def test_pipeline_runs_sync_and_async_steps_in_order():
    reg = StepRegistry()
    results = []

    def s1(ctx: PipelineContext) -> None:
        results.append("s1")

    async def s2(ctx: PipelineContext) -> None:
        results.append("s2")

    reg.register(StepSpec(id="S01", stage=Stage.PLACEMENT, fn=s1))
    reg.register(StepSpec(id="S02", stage=Stage.PLACEMENT, fn=s2, dependencies=["S01"]))

    ctx = await Pipeline(registry=reg).run(_ctx())

    assert results == ["s1", "s2"]
    assert ctx.completed_steps == ["S01", "S02"]


@pytest.mark.asyncio
async def test_pipeline_propagates_step_errors():
    reg = StepRegistry()
    ran = []

    def fail(ctx: PipelineContext) -> None:
        raise ValueError("test error")

    def after(ctx: PipelineContext) -> None:
        ran.append("after")

    reg.register(StepSpec(id="S01", stage=Stage.PLACEMENT, fn=fail))
    reg.register(StepSpec(id="S02", stage=Stage.PLACEMENT, fn=after, dependencies=["S01"]))

    ctx = _ctx()
    with pytest.raises(ValueError, match="test error"):
        await Pipeline(registry=reg).run(ctx)
    assert ran == []
    assert ctx.completed_steps == []


@pytest.mark.asyncio
async def test_finalize_defaults_collaborators():
    # No caches or random source passed: fresh ones are created
    descriptor = await Pipeline(scene_grid_size=100).finalize(EffectOptions(file="a.webm"))
    assert descriptor.file == "a.webm"
    assert descriptor.scale.x == 1.0


def test_create_pipeline_uses_builtin_steps_and_settings():
    pipeline = create_pipeline(PipelineConfig(min_reach_scale_y=0.25))
    assert pipeline.registry.count == 15
    assert pipeline.config.min_reach_scale_y == 0.25
    assert pipeline.scene_grid_size == 100.0

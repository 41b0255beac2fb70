"""S06 — Override Hooks (pre-scale)."""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.hooks import OverrideHookChain
from sequencer.engine.registry import Stage, step


@step(
    id="S06",
    stage=Stage.ASSET,
    dependencies=["S05"],
    description="Run pre-scale override hooks",
)
async def overrides(ctx: PipelineContext) -> None:
    if not ctx.options.overrides:
        return
    chain = OverrideHookChain(ctx.options.overrides)
    ctx.descriptor = await chain.run(ctx, ctx.descriptor)

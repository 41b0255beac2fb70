"""S14 — Override Hooks (post-path)."""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.hooks import OverrideHookChain
from sequencer.engine.registry import Stage, step


@step(
    id="S14",
    stage=Stage.OUTPUT,
    dependencies=["S13"],
    description="Run post-path override hooks",
)
async def post_overrides(ctx: PipelineContext) -> None:
    if not ctx.options.post_overrides:
        return
    chain = OverrideHookChain(ctx.options.post_overrides)
    ctx.descriptor = await chain.run(ctx, ctx.descriptor)

"""S12 — Random Mirror."""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step


@step(
    id="S12",
    stage=Stage.SCALING,
    dependencies=["S11"],
    description="Randomly flip the X and/or Y scale",
)
def random_mirror(ctx: PipelineContext) -> None:
    opts = ctx.options
    if opts.random_mirror_x and ctx.rng.uniform_bool():
        ctx.descriptor.scale.x *= -1
    if opts.random_mirror_y and ctx.rng.uniform_bool():
        ctx.descriptor.scale.y *= -1

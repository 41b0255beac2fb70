"""S05 — Random Rotation.

Adds a uniform offset in [0, pi). Not meant to be combined with reach mode;
if it is, the displayed direction simply includes the random offset.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step


@step(
    id="S05",
    stage=Stage.PLACEMENT,
    dependencies=["S04"],
    description="Add a random rotation",
)
def random_rotation(ctx: PipelineContext) -> None:
    if ctx.options.random_rotation:
        ctx.descriptor.rotation += ctx.rng.uniform_float(0.0, ctx.config.max_random_rotation)

"""S09 — Grid Normalization.

Rescale sprites authored against a different grid size onto the scene grid.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step


@step(
    id="S09",
    stage=Stage.SCALING,
    dependencies=["S08"],
    description="Scale by scene grid / authored grid",
)
def grid_normalization(ctx: PipelineContext) -> None:
    ratio = ctx.grid_ratio
    ctx.descriptor.scale.x *= ratio
    ctx.descriptor.scale.y *= ratio

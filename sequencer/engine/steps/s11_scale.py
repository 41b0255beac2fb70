"""S11 — Scale.

A number scales uniformly, a (min, max) pair samples one uniform value, a
per-axis point is used as-is. Multiplies into the existing scale.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step
from sequencer.models.locations import Point


@step(
    id="S11",
    stage=Stage.SCALING,
    dependencies=["S10"],
    description="Apply the configured scale",
)
def scale(ctx: PipelineContext) -> None:
    spec = ctx.options.scale
    if spec is None:
        return

    if isinstance(spec, tuple):
        value = ctx.rng.uniform_float(spec[0], spec[1])
        sx = sy = value
    elif isinstance(spec, Point):
        sx, sy = spec.x, spec.y
    else:
        sx = sy = float(spec)

    ctx.descriptor.scale.x *= sx
    ctx.descriptor.scale.y *= sy

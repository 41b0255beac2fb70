"""S04 — Target Resolution.

Aim at the resolved target. Without an explicit anchor the sprite is anchored
on its trailing edge so it starts at the origin and extends towards the target.
A target without an origin is ignored.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step
from sequencer.models.locations import Point
from sequencer.utils.geometry import distance_and_angle


@step(
    id="S04",
    stage=Stage.PLACEMENT,
    dependencies=["S03"],
    description="Resolve the target location, distance and rotation",
)
def target_resolution(ctx: PipelineContext) -> None:
    opts = ctx.options
    if ctx.origin is None or opts.target is None:
        return

    ctx.target = ctx.resolver().resolve(
        opts.target, ctx.repetition, opts.missed, as_target=True
    )

    if not ctx.has_explicit_anchor:
        ctx.descriptor.anchor = Point(x=0.0, y=0.5)

    distance, angle = distance_and_angle(ctx.origin, ctx.target)
    ctx.descriptor.distance = distance
    ctx.descriptor.rotation = angle

"""S03 — Origin Resolution.

Place the effect at its resolved origin. A miss with no target perturbs the
origin itself; with a target, the miss is applied to the target in S04.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step
from sequencer.models.locations import Point


@step(
    id="S03",
    stage=Stage.PLACEMENT,
    dependencies=["S02"],
    description="Resolve the origin location",
)
def origin_resolution(ctx: PipelineContext) -> None:
    opts = ctx.options
    if opts.origin is None:
        return

    missed = opts.missed and opts.target is None
    ctx.origin = ctx.resolver().resolve(opts.origin, ctx.repetition, missed)
    ctx.descriptor.position = ctx.origin.copy_point()

    if not ctx.has_explicit_anchor:
        ctx.descriptor.anchor = Point(x=0.5, y=0.5)

"""S02 — Explicit Anchor."""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step


@step(
    id="S02",
    stage=Stage.PLACEMENT,
    dependencies=["S01"],
    description="Apply a configured anchor",
)
def explicit_anchor(ctx: PipelineContext) -> None:
    if ctx.options.anchor is not None:
        # Copy: later steps write anchor.x in place
        ctx.descriptor.anchor = ctx.options.anchor.copy_point()

"""S13 — Base Folder."""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step


@step(
    id="S13",
    stage=Stage.OUTPUT,
    dependencies=["S12"],
    description="Prefix the base folder",
)
def base_folder(ctx: PipelineContext) -> None:
    ctx.descriptor.file = ctx.options.base_folder + ctx.descriptor.file

"""S15 — Named Position.

Record where this run ended up so later effects in the sequence can refer to
it by name. Unnamed effects are recorded under their filename stem.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step


@step(
    id="S15",
    stage=Stage.OUTPUT,
    dependencies=["S14"],
    description="Record the position under the effect's name",
)
def named_position(ctx: PipelineContext) -> None:
    name = ctx.options.name or file_stem(ctx.descriptor.file) or ctx.config.unnamed_sentinel
    ctx.positions.record(name, ctx.repetition, ctx.descriptor.position)
    ctx.recorded_name = name


def file_stem(path: str) -> str:
    """Filename up to its first dot: folder/fire_bolt.blue.webm -> fire_bolt."""
    return path.split("/")[-1].split(".")[0]

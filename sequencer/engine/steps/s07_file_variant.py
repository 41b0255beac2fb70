"""S07 — File Variant Selection."""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step
from sequencer.errors import ConfigurationError
from sequencer.utils.random_source import random_element


@step(
    id="S07",
    stage=Stage.ASSET,
    dependencies=["S06"],
    description="Pick one of several file variants",
)
def file_variant(ctx: PipelineContext) -> None:
    file = ctx.descriptor.file
    if isinstance(file, str):
        return
    if not file:
        raise ConfigurationError("Effect has an empty list of file variants")
    ctx.descriptor.file = random_element(ctx.rng, file)

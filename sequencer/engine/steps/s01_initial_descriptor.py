"""S01 — Initial Descriptor.

Start from the identity placement: origin, zero anchor, unit scale, no
rotation. Timing comes straight from the options.
"""

from __future__ import annotations

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step
from sequencer.models.descriptor import RenderDescriptor


@step(
    id="S01",
    stage=Stage.PLACEMENT,
    description="Identity descriptor with configured timing",
)
def initial_descriptor(ctx: PipelineContext) -> None:
    opts = ctx.options
    ctx.descriptor = RenderDescriptor(
        file=opts.file if isinstance(opts.file, str) else list(opts.file),
        playback_rate=opts.playback_rate,
        fade_in=opts.fade_in,
        fade_out=opts.fade_out,
    )

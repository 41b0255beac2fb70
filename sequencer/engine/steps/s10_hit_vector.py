"""S10 — Hit Vector.

In reach mode, stretch the sprite so its usable length (width minus the start
and end trim points) spans the origin-target distance. Assumes the art points
left to right. Overwrites the grid-normalized scale.
"""

from __future__ import annotations

import logging

from sequencer.engine.context import PipelineContext
from sequencer.engine.registry import Stage, step
from sequencer.errors import ConfigurationError

logger = logging.getLogger(__name__)


@step(
    id="S10",
    stage=Stage.SCALING,
    dependencies=["S09"],
    description="Stretch towards the target using asset dimensions",
)
async def hit_vector(ctx: PipelineContext) -> None:
    opts = ctx.options
    d = ctx.descriptor
    if not opts.reaches or d.distance == 0:
        return

    path = opts.base_folder + d.file
    dims = await ctx.assets.fetch(path, structured=opts.structured_asset_names)

    true_length = dims.x - opts.start_point - opts.end_point
    if true_length <= 0:
        raise ConfigurationError(
            f"Trim points ({opts.start_point} + {opts.end_point}) leave no usable "
            f"length in {path!r} ({dims.x}px wide)"
        )

    d.scale.x = d.distance / true_length
    d.scale.y = max(ctx.config.min_reach_scale_y, d.scale.x)
    d.anchor.x = opts.start_point / dims.x
    logger.debug(
        "Hit vector for %s: %.1fpx over %dpx usable -> scale (%.3f, %.3f)",
        path,
        d.distance,
        true_length,
        d.scale.x,
        d.scale.y,
    )

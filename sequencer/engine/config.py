"""Pipeline configuration — tuning constants for the finalize steps."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Constants the finalize steps read from ``ctx.config``."""

    # Missed offsets: the minimum push is grid_size / miss_offset_divisor
    miss_offset_divisor: float = 5.0

    # Reach mode: vertical scale follows horizontal stretch but never drops below this
    min_reach_scale_y: float = 0.4

    # Random rotation is drawn from [0, max_random_rotation)
    max_random_rotation: float = math.pi

    # Name recorded for effects with no explicit name and no usable filename
    unnamed_sentinel: str = "-1"

"""Resolve location references into concrete canvas points.

Handles every LocationRef variant with one match, plus "missed" sampling:
a randomized offset that lands near, but not on, the reference.
"""

from __future__ import annotations

import logging

from sequencer.engine.position_cache import NamedPositionCache
from sequencer.models.locations import (
    EntityRef,
    LocationRef,
    NameRef,
    Point,
    PointRef,
    TemplateRef,
)
from sequencer.utils.random_source import RandomSource

logger = logging.getLogger(__name__)


class LocationResolver:
    def __init__(
        self,
        positions: NamedPositionCache,
        rng: RandomSource,
        grid_size: float,
        miss_offset_divisor: float = 5.0,
    ) -> None:
        self.positions = positions
        self.rng = rng
        self.grid_size = grid_size
        self.miss_offset_divisor = miss_offset_divisor

    def resolve(
        self,
        ref: LocationRef,
        repetition: int,
        missed: bool = False,
        *,
        as_target: bool = False,
    ) -> Point:
        """Concrete point for ``ref``.

        Cones and rays resolve to their directional endpoint when used as a
        target, and to their origin otherwise.
        """
        width, height = 1.0, 1.0

        match ref:
            case NameRef(name=name):
                point = self.positions.lookup(name, repetition)
            case EntityRef():
                point = Point(x=ref.x, y=ref.y)
                width, height = ref.width, ref.height
            case TemplateRef():
                if as_target and ref.is_directional and ref.end is not None:
                    point = ref.end.copy_point()
                else:
                    point = Point(x=ref.x, y=ref.y)
            case PointRef():
                point = Point(x=ref.x, y=ref.y)
            case _:
                raise TypeError(f"Unsupported location reference: {ref!r}")

        if not missed:
            return point
        return self.missed_position(point, width, height)

    def missed_position(self, point: Point, width: float = 1.0, height: float = 1.0) -> Point:
        """Push ``point`` just outside a width x height (grid units) footprint.

        One axis, chosen at random, is displaced past the footprint's edge; the
        other gets a smaller jitter. Each axis gets an independent random sign.
        """
        grid = self.grid_size
        half_w = width * grid / 2
        half_h = height * grid / 2
        token_offset = grid / self.miss_offset_divisor

        x_primary = self.rng.uniform_bool()
        flip_x = -1 if self.rng.uniform_bool() else 1
        flip_y = -1 if self.rng.uniform_bool() else 1

        if x_primary:
            dx = half_w + self.rng.uniform_float(token_offset, grid / 2)
            dy = self.rng.uniform_float(token_offset, half_h + grid / 2)
        else:
            dx = self.rng.uniform_float(token_offset, half_w + grid / 2)
            dy = half_h + self.rng.uniform_float(token_offset, grid / 2)

        missed = Point(x=point.x + dx * flip_x, y=point.y + dy * flip_y)
        logger.debug(
            "Missed offset (%s primary): (%.1f, %.1f) -> (%.1f, %.1f)",
            "x" if x_primary else "y",
            point.x,
            point.y,
            missed.x,
            missed.y,
        )
        return missed

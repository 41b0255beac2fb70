"""Leaf-node vector helpers. No engine imports."""

from __future__ import annotations

import numpy as np

from sequencer.models.locations import Point


def offset(a: Point, b: Point) -> tuple[float, float]:
    """Component-wise b - a."""
    return (b.x - a.x, b.y - a.y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx, dy = offset(a, b)
    return float(np.hypot(dx, dy))


def angle(a: Point, b: Point) -> float:
    """Angle of the ray a -> b in radians (atan2, y-down canvas winding)."""
    dx, dy = offset(a, b)
    return float(np.arctan2(dy, dx))


def distance_and_angle(a: Point, b: Point) -> tuple[float, float]:
    """(distance, angle) of the ray from a to b."""
    return distance(a, b), angle(a, b)

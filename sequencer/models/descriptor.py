"""Render descriptor — the finalized record handed to a renderer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sequencer.models.locations import Point


class AssetDimensions(BaseModel):
    """Pixel size of a sprite."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class RenderDescriptor(BaseModel):
    """Concrete placement + timing for one play of one effect.

    Mutable on purpose: override hooks edit it in place or return a new one.
    ``scale`` is signed; a negative axis means the sprite is mirrored.
    """

    file: str | list[str] = ""
    position: Point = Field(default_factory=Point)
    anchor: Point = Field(default_factory=Point)
    scale: Point = Field(default_factory=lambda: Point(x=1.0, y=1.0))
    # Radians, same winding as the renderer (y-down canvas)
    rotation: float = 0.0
    distance: float = 0.0
    playback_rate: float = 1.0
    fade_in: float = 0.0
    fade_out: float = 0.0

"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from sequencer.models.effect import anchor_input, scale_input
from sequencer.models.locations import LocationRef, Point


class EffectRequest(BaseModel):
    """JSON form of an effect. Same fields as EffectOptions minus the hooks."""

    file: str | list[str] = Field(..., description="Asset path, or variants to pick from")
    name: str | None = None
    base_folder: str = ""
    origin: LocationRef | None = None
    target: LocationRef | None = None
    rotation_only: bool = Field(default=True, description="False = stretch to reach the target")
    missed: bool = False
    scale: float | tuple[float, float] | Point | None = None
    anchor: Point | None = None
    random_rotation: bool = False
    random_mirror_x: bool = False
    random_mirror_y: bool = False
    start_point: float = 0.0
    end_point: float = 0.0
    grid_size: float | None = None
    structured_asset_names: bool = False
    playback_rate: float = 1.0
    fade_in: float = 0.0
    fade_out: float = 0.0
    template_context: dict[str, Any] | None = None
    repetitions: int = Field(default=1, ge=1)

    @field_validator("scale", mode="before")
    @classmethod
    def _scale_axes(cls, v: Any) -> Any:
        return scale_input(v)

    @field_validator("anchor", mode="before")
    @classmethod
    def _anchor_axes(cls, v: Any) -> Any:
        return anchor_input(v)


class NamedPositionSeed(BaseModel):
    name: str
    repetition: int = 0
    x: float = 0.0
    y: float = 0.0


class FinalizeRequest(BaseModel):
    effects: list[EffectRequest] = Field(..., description="Effects in declaration order")
    seed: int | None = Field(default=None, description="Random seed for reproducible output")
    scene_grid_size: float | None = Field(default=None, gt=0)
    named_positions: list[NamedPositionSeed] = Field(
        default_factory=list,
        description="Positions to pre-seed before the first effect",
    )

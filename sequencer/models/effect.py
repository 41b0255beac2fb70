"""Effect options — the immutable, declarative description of one effect."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sequencer.models.locations import LocationRef, Point, fill_axes

# A hook is hook(ctx, descriptor) -> descriptor, optionally async.
# Typed loosely here so the model does not depend on the engine.
OverrideHook = Callable[..., Any]

ScaleSpec = float | tuple[float, float] | Point


def scale_input(value: Any) -> Any:
    """Per-axis scale mapping: a missing axis stays at 1."""
    if isinstance(value, Mapping):
        return fill_axes(value, 1.0)
    return value


def anchor_input(value: Any) -> Any:
    """Anchor as a number (both axes) or a mapping whose missing axis centres at 0.5."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return {"x": value, "y": value}
    if isinstance(value, Mapping):
        return fill_axes(value, 0.5)
    return value


class EffectOptions(BaseModel):
    """Everything the pipeline needs to know about an effect, frozen once built.

    Assemble through ``EffectBuilder`` or construct directly with keyword
    arguments; unset fields keep the identity defaults.
    """

    model_config = ConfigDict(frozen=True)

    # One path, or several variants to pick from at random
    file: str | tuple[str, ...]
    name: str | None = None
    base_folder: str = ""

    origin: LocationRef | None = None
    target: LocationRef | None = None
    # False = reach/stretch towards the target
    rotation_only: bool = True
    missed: bool = False

    scale: ScaleSpec | None = None
    anchor: Point | None = None
    random_rotation: bool = False
    random_mirror_x: bool = False
    random_mirror_y: bool = False

    # Pixels reserved at the start/end of the sprite for reach calculations
    start_point: float = Field(default=0.0, ge=0)
    end_point: float = Field(default=0.0, ge=0)
    # Grid size the asset was authored against; None = the scene grid size
    grid_size: float | None = Field(default=None, gt=0)
    # Parse pixel dimensions from "<name>_<W>x<H>.<ext>" filenames
    structured_asset_names: bool = False

    playback_rate: float = Field(default=1.0, gt=0)
    fade_in: float = Field(default=0.0, ge=0)
    fade_out: float = Field(default=0.0, ge=0)

    template_context: dict[str, Any] | None = None

    overrides: tuple[OverrideHook, ...] = ()
    post_overrides: tuple[OverrideHook, ...] = ()

    @field_validator("scale", mode="before")
    @classmethod
    def _scale_axes(cls, v: Any) -> Any:
        return scale_input(v)

    @field_validator("anchor", mode="before")
    @classmethod
    def _anchor_axes(cls, v: Any) -> Any:
        return anchor_input(v)

    @field_validator("file")
    @classmethod
    def _file_not_empty(cls, v: str | tuple[str, ...]) -> str | tuple[str, ...]:
        if isinstance(v, str):
            if not v:
                raise ValueError("file must not be empty")
        elif not v or not all(v):
            raise ValueError("file variants must be a non-empty list of non-empty paths")
        return v

    @field_validator("overrides", "post_overrides")
    @classmethod
    def _hooks_callable(cls, v: tuple[OverrideHook, ...]) -> tuple[OverrideHook, ...]:
        for hook in v:
            if not callable(hook):
                raise ValueError(f"override {hook!r} is not callable")
        return v

    @model_validator(mode="after")
    def _scale_range_ordered(self) -> EffectOptions:
        if isinstance(self.scale, tuple) and self.scale[0] > self.scale[1]:
            raise ValueError(
                f"scale range minimum {self.scale[0]} exceeds maximum {self.scale[1]}"
            )
        return self

    @property
    def reaches(self) -> bool:
        return not self.rotation_only

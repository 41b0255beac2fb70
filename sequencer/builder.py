"""Chained builder for effect options.

Usage:
    options = (
        EffectBuilder("jb2a/fire_bolt_1600x400.webm")
        .jb2a()
        .at_location(caster)
        .reach_towards("impact")
        .missed()
        .build()
    )

Each call records one setting; ``build()`` validates them once and returns a
frozen ``EffectOptions``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from sequencer.errors import ConfigurationError
from sequencer.models.effect import EffectOptions, OverrideHook, anchor_input
from sequencer.models.locations import (
    EntityRef,
    LocationRef,
    NameRef,
    Point,
    PointRef,
    TemplateRef,
)

if TYPE_CHECKING:
    from sequencer.sequence import Sequence as EffectSequence

# Preset for JB2A-style assets: authored on a 100px grid with 200px of lead-in
# and lead-out art, dimensions encoded in the filename.
JB2A_GRID_SIZE = 100.0
JB2A_TRIM_POINTS = 200.0

_location_adapter: TypeAdapter[Any] = TypeAdapter(LocationRef)


def to_location(value: Any) -> PointRef | EntityRef | TemplateRef | NameRef:
    """Normalize anything placeable into a LocationRef.

    Strings are names of earlier effects. Mappings and objects are read for
    ``x``/``y`` (or a ``center`` with x/y); if they also carry width or height
    they become entities, otherwise plain points.
    """
    if isinstance(value, (PointRef, EntityRef, TemplateRef, NameRef)):
        return value
    if isinstance(value, str):
        return NameRef(name=value)
    if isinstance(value, Point):
        return PointRef(x=value.x, y=value.y)
    if value is None:
        return PointRef()
    if isinstance(value, Mapping):
        if "kind" in value:
            return _location_adapter.validate_python(value)
        fields = dict(value)
    elif isinstance(value, Sequence) and len(value) == 2:
        return PointRef(x=float(value[0]), y=float(value[1]))
    else:
        fields = {
            k: getattr(value, k)
            for k in ("x", "y", "center", "width", "height")
            if hasattr(value, k)
        }

    center = fields.get("center")
    if center is not None:
        fields["x"], fields["y"] = _xy(center)

    x = float(fields.get("x") or 0.0)
    y = float(fields.get("y") or 0.0)
    if "width" in fields or "height" in fields:
        return EntityRef(
            x=x,
            y=y,
            width=float(fields.get("width") or 1.0),
            height=float(fields.get("height") or 1.0),
        )
    return PointRef(x=x, y=y)


def _xy(value: Any) -> tuple[Any, Any]:
    if isinstance(value, Mapping):
        return value.get("x"), value.get("y")
    if isinstance(value, Sequence):
        return value[0], value[1]
    return getattr(value, "x", None), getattr(value, "y", None)


def to_anchor(value: float | Mapping[str, float] | Point | None = None) -> Point:
    """Number -> both axes; mapping/point -> per axis; missing axes centre at 0.5."""
    if isinstance(value, Point):
        return value.copy_point()
    return Point(**anchor_input({} if value is None else value))


class EffectBuilder:
    """Mutable, chainable front end for ``EffectOptions``."""

    def __init__(self, file: str | Sequence[str] = "", sequence: EffectSequence | None = None) -> None:
        self._fields: dict[str, Any] = {}
        self._overrides: list[OverrideHook] = []
        self._post_overrides: list[OverrideHook] = []
        self._repetitions = 1
        self._sequence = sequence
        self.file(file)

    # --- Asset ---

    def file(self, file: str | Sequence[str]) -> EffectBuilder:
        """One path, or a list of variants picked at random each play."""
        self._fields["file"] = file if isinstance(file, str) else tuple(file)
        return self

    def base_folder(self, folder: str) -> EffectBuilder:
        folder = folder.replace("\\", "/")
        if not folder.endswith("/"):
            folder += "/"
        self._fields["base_folder"] = folder
        return self

    def template_context(self, context: Mapping[str, Any]) -> EffectBuilder:
        """Values substituted into the (chosen) file path."""
        self._fields["template_context"] = dict(context)
        return self

    def name(self, name: str) -> EffectBuilder:
        """Record this effect's position so later effects can target it by name."""
        self._fields["name"] = name
        return self

    def jb2a(self, enabled: bool = True) -> EffectBuilder:
        if enabled:
            self.grid_size(JB2A_GRID_SIZE)
            self.start_point(JB2A_TRIM_POINTS)
            self.end_point(JB2A_TRIM_POINTS)
        else:
            self._fields.pop("grid_size", None)
            self.start_point(0)
            self.end_point(0)
        self._fields["structured_asset_names"] = enabled
        return self

    # --- Placement ---

    def at_location(self, location: Any) -> EffectBuilder:
        self._fields["origin"] = to_location(location)
        return self

    def rotate_towards(self, location: Any) -> EffectBuilder:
        self._fields["target"] = to_location(location)
        self._fields["rotation_only"] = True
        return self

    def reach_towards(self, location: Any) -> EffectBuilder:
        """Rotate towards the target and stretch the sprite to reach it."""
        self._fields["target"] = to_location(location)
        self._fields["rotation_only"] = False
        return self

    def missed(self, missed: bool = True) -> EffectBuilder:
        self._fields["missed"] = missed
        return self

    def start_point(self, pixels: float) -> EffectBuilder:
        self._fields["start_point"] = pixels
        return self

    def end_point(self, pixels: float) -> EffectBuilder:
        self._fields["end_point"] = pixels
        return self

    def anchor(self, anchor: float | Mapping[str, float] | Point | None = None) -> EffectBuilder:
        self._fields["anchor"] = to_anchor(anchor)
        return self

    def center(self) -> EffectBuilder:
        """Anchor at the sprite's centre, overriding the target's trailing-edge anchor."""
        return self.anchor()

    # --- Scale / orientation ---

    def scale(self, minimum: float | Mapping[str, float] | Point, maximum: float | None = None) -> EffectBuilder:
        """Uniform number, per-axis {x, y}, or a (min, max) range sampled per play."""
        if maximum is not None:
            if not isinstance(minimum, (int, float)):
                raise ConfigurationError("A scale range needs a numeric minimum")
            self._fields["scale"] = (float(minimum), float(maximum))
        elif isinstance(minimum, Mapping):
            self._fields["scale"] = dict(minimum)
        else:
            self._fields["scale"] = minimum
        return self

    def random_rotation(self, enabled: bool = True) -> EffectBuilder:
        self._fields["random_rotation"] = enabled
        return self

    def randomize_mirror_x(self, enabled: bool = True) -> EffectBuilder:
        self._fields["random_mirror_x"] = enabled
        return self

    def randomize_mirror_y(self, enabled: bool = True) -> EffectBuilder:
        self._fields["random_mirror_y"] = enabled
        return self

    def grid_size(self, size: float) -> EffectBuilder:
        self._fields["grid_size"] = size
        return self

    # --- Timing ---

    def playback_rate(self, rate: float = 1.0) -> EffectBuilder:
        self._fields["playback_rate"] = rate
        return self

    def fade_in(self, duration: float) -> EffectBuilder:
        self._fields["fade_in"] = duration
        return self

    def fade_out(self, duration: float) -> EffectBuilder:
        self._fields["fade_out"] = duration
        return self

    def repetitions(self, count: int) -> EffectBuilder:
        if count < 1:
            raise ConfigurationError("repetitions must be at least 1")
        self._repetitions = count
        return self

    @property
    def repetition_count(self) -> int:
        return self._repetitions

    # --- Hooks ---

    def add_override(self, hook: OverrideHook) -> EffectBuilder:
        """Run ``hook(ctx, descriptor)`` before scaling; it must return the descriptor."""
        if not callable(hook):
            raise ConfigurationError("The given override needs to be callable")
        self._overrides.append(hook)
        return self

    def add_post_override(self, hook: OverrideHook) -> EffectBuilder:
        """Run ``hook(ctx, descriptor)`` after the final path is known."""
        if not callable(hook):
            raise ConfigurationError("The given override needs to be callable")
        self._post_overrides.append(hook)
        return self

    # --- Output ---

    def build(self) -> EffectOptions:
        return build_options(
            **self._fields,
            overrides=tuple(self._overrides),
            post_overrides=tuple(self._post_overrides),
        )

    def then(self) -> EffectSequence:
        """Return to the owning sequence to keep chaining."""
        if self._sequence is None:
            raise ConfigurationError("This effect builder is not attached to a sequence")
        return self._sequence


def build_options(**fields: Any) -> EffectOptions:
    """Construct EffectOptions, surfacing validation problems as ConfigurationError."""
    try:
        return EffectOptions(**fields)
    except ValidationError as e:
        raise ConfigurationError(_summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "options"
        parts.append(f"{loc}: {err['msg']}")
    return "Invalid effect options: " + "; ".join(parts)

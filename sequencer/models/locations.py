"""Location references — the polymorphic inputs an effect can be placed at or aimed towards."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """Plain 2D pair. Used for canvas positions as well as anchor/scale pairs."""

    x: float = 0.0
    y: float = 0.0

    def copy_point(self) -> Point:
        return Point(x=self.x, y=self.y)


class PointRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["point"] = "point"
    x: float = 0.0
    y: float = 0.0


class EntityRef(BaseModel):
    """A spatial entity (token) on the scene. x/y is its centre, width/height in grid units."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["entity"] = "entity"
    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0


class TemplateRef(BaseModel):
    """An area-of-effect template. Cones and rays carry a directional endpoint."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["template"] = "template"
    shape: Literal["circle", "cone", "rect", "ray"] = "circle"
    x: float = 0.0
    y: float = 0.0
    end: Point | None = None

    @property
    def is_directional(self) -> bool:
        return self.shape in ("cone", "ray")


class NameRef(BaseModel):
    """Reference to the recorded position of an earlier named effect."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    name: str


LocationRef = Annotated[
    Union[PointRef, EntityRef, TemplateRef, NameRef],
    Field(discriminator="kind"),
]


def fill_axes(value: Mapping[str, Any], default: float) -> dict[str, Any]:
    """Per-axis mapping with both axes present; a missing or None axis takes ``default``."""
    x = value.get("x")
    y = value.get("y")
    return {"x": default if x is None else x, "y": default if y is None else y}

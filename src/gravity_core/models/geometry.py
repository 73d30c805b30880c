"""Geometry value types for the priority circle."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gravity_core.constants import (
    CIRCLE_CENTER_X,
    CIRCLE_CENTER_Y,
    CIRCLE_RADIUS,
    POLE_COORDINATES,
    POLE_LABELS,
    VIEW_BOX,
)


class Point(BaseModel):
    """A 2D coordinate in the 300x300 logical space (origin top-left)."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(description="Horizontal coordinate")
    y: float = Field(description="Vertical coordinate, growing downwards")


class CircleConfig(BaseModel):
    """The bounded disk the puck is dragged inside."""

    model_config = ConfigDict(frozen=True)

    center: Point = Field(description="Circle center")
    radius: float = Field(gt=0, description="Circle radius in logical units")
    view_box: str = Field(default=VIEW_BOX, description="SVG viewBox for the logical space")


class Pole(BaseModel):
    """A fixed anchor on the circle's edge for one weight dimension."""

    model_config = ConfigDict(frozen=True)

    dimension: str = Field(description="Weight dimension this pole pulls toward")
    x: float = Field(description="Horizontal coordinate")
    y: float = Field(description="Vertical coordinate")
    angle: float = Field(ge=0, lt=360, description="Degrees clockwise from straight up")
    label: str = Field(description="Short display label")

    @property
    def point(self) -> Point:
        """Return the pole position as a Point."""
        return Point(x=self.x, y=self.y)


CIRCLE_CONFIG = CircleConfig(
    center=Point(x=CIRCLE_CENTER_X, y=CIRCLE_CENTER_Y),
    radius=CIRCLE_RADIUS,
)

POLES: dict[str, Pole] = {
    name: Pole(dimension=name, x=x, y=y, angle=angle, label=POLE_LABELS[name])
    for name, (x, y, angle) in POLE_COORDINATES.items()
}

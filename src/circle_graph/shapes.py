"""
Shape primitives for rendering.

Every primitive is immutable and supports the same pipeline:
scale(factor) about the origin, move(offset), then draw() into an
SvgElement. Scaling multiplies positions and sizes; a line's stroke width
is a display width and is left unscaled.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol, TypeVar

from .color import Color
from .elements import SvgElement
from .geometry import DirectedSegment, Vector

ShapeT = TypeVar("ShapeT", bound="Shape")


class Shape(Protocol):
    """Anything that can be scaled, moved and drawn."""

    def scale(self: ShapeT, factor: float) -> ShapeT: ...

    def move(self: ShapeT, offset: Vector) -> ShapeT: ...

    def draw(self) -> SvgElement: ...


@dataclass(frozen=True)
class Circle:
    """Filled circle."""

    center: Vector
    radius: float
    fill: Color
    stroke: Color

    def scale(self, factor: float) -> Circle:
        return replace(self, center=self.center * factor, radius=self.radius * factor)

    def move(self, offset: Vector) -> Circle:
        return replace(self, center=self.center + offset)

    def draw(self) -> SvgElement:
        return SvgElement(
            "circle",
            {
                "cx": self.center.x,
                "cy": self.center.y,
                "r": self.radius,
                "fill": self.fill.to_css(),
                "stroke": self.stroke.to_css(),
            },
        )


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its center and size."""

    center: Vector
    width: float
    height: float
    fill: Color
    stroke: Color

    @property
    def left(self) -> float:
        return self.center.x - self.width / 2

    @property
    def top(self) -> float:
        return self.center.y - self.height / 2

    def scale(self, factor: float) -> Rectangle:
        return replace(
            self,
            center=self.center * factor,
            width=self.width * factor,
            height=self.height * factor,
        )

    def move(self, offset: Vector) -> Rectangle:
        return replace(self, center=self.center + offset)

    def draw(self) -> SvgElement:
        return SvgElement(
            "rect",
            {
                "x": self.left,
                "y": self.top,
                "width": self.width,
                "height": self.height,
                "fill": self.fill.to_css(),
                "stroke": self.stroke.to_css(),
            },
        )


@dataclass(frozen=True)
class LineSegment:
    """Straight line with a fixed stroke width."""

    start: Vector
    end: Vector
    width: float
    color: Color

    @classmethod
    def from_segment(cls, segment: DirectedSegment, width: float, color: Color) -> LineSegment:
        return cls(segment.start, segment.end, width, color)

    def scale(self, factor: float) -> LineSegment:
        return replace(self, start=self.start * factor, end=self.end * factor)

    def move(self, offset: Vector) -> LineSegment:
        return replace(self, start=self.start + offset, end=self.end + offset)

    def draw(self) -> SvgElement:
        return SvgElement(
            "line",
            {
                "x1": self.start.x,
                "y1": self.start.y,
                "x2": self.end.x,
                "y2": self.end.y,
                "stroke": self.color.to_css(),
                "stroke-width": self.width,
            },
        )


__all__ = [
    "Shape",
    "Circle",
    "Rectangle",
    "LineSegment",
]

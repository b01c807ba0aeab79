"""
2D vector primitives.

Provides the small immutable geometry types the layout and render steps
are built from:
- Vector: 2D point/offset with rotation about the origin
- DirectedSegment: Ordered pair of vectors (start -> end)
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """2D vector."""

    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def rotate(self, angle: float) -> Vector:
        """Rotate counter-clockwise about the origin by angle (radians)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector(self.x * c - self.y * s, self.x * s + self.y * c)

    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle from the positive x axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Vector({self.x:.4f}, {self.y:.4f})"


@dataclass(frozen=True)
class DirectedSegment:
    """Segment from start to end."""

    start: Vector
    end: Vector

    @property
    def length(self) -> float:
        """Get segment length."""
        return (self.end - self.start).norm()

    def is_degenerate(self) -> bool:
        """Check if start and end coincide (self-loop edges)."""
        return self.start == self.end


ORIGIN = Vector(0.0, 0.0)
UNIT_X = Vector(1.0, 0.0)


__all__ = [
    "Vector",
    "DirectedSegment",
    "ORIGIN",
    "UNIT_X",
]

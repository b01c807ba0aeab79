"""
Channel-based color with alpha, shared by all shape constructors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """
    RGBA color.

    Attributes:
        red: Red channel (0 to 255)
        green: Green channel (0 to 255)
        blue: Blue channel (0 to 255)
        alpha: Opacity (0.0 to 1.0)
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in [0, 255], got {value}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in [0, 1], got {self.alpha}")

    def to_css(self) -> str:
        """Format as a CSS ``rgba()`` color, e.g. ``rgba(0,50,255,0.8)``."""
        return f"rgba({self.red},{self.green},{self.blue},{self.alpha:g})"

    def __str__(self) -> str:
        return self.to_css()


BLACK = Color(0, 0, 0, 1.0)
MARKER_BLUE = Color(0, 50, 255, 0.8)
BOX_BLUE = Color(0, 100, 255, 0.1)


__all__ = [
    "Color",
    "BLACK",
    "MARKER_BLUE",
    "BOX_BLUE",
]

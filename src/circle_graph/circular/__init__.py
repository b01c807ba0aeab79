"""
Circular graph layout.

This module provides:
- circle_points: N points evenly spaced on a circle
- CircularLayout: Positions graph vertices evenly on a circle
"""

from .circular import CircularLayout, circle_points

__all__ = [
    "CircularLayout",
    "circle_points",
]

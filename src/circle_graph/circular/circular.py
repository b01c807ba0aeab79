"""
Circular layout algorithm.

Places all vertices evenly distributed on a circle centered at the origin.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Union

import numpy as np

from ..base import StaticLayout
from ..geometry import UNIT_X, Vector
from ..types import EdgeLike, EventCallback, Vertex, VertexLike
from ..validation import ValidationError, validate_count

SortKey = Union[str, Callable[[Vertex], Any]]


def circle_points(n: int, *, radius: float = 1.0, start_angle: float = 0.0) -> list[Vector]:
    """
    Compute n points evenly spaced on a circle around the origin.

    Point k is (1, 0) rotated by ``start_angle + k * 2*pi/n`` and scaled by
    radius, so the first point sits at angle start_angle.

    Args:
        n: Number of points
        radius: Circle radius
        start_angle: Angle of the first point in radians

    Returns:
        List of n vectors, counter-clockwise from start_angle

    Raises:
        ValidationError: If n < 0
    """
    validate_count(n)
    if n == 0:
        return []

    angles = start_angle + np.arange(n) * (2 * np.pi / n)
    return [UNIT_X.rotate(float(angle)) * radius for angle in angles]


class CircularLayout(StaticLayout):
    """
    Circular layout - positions vertices on a circle.

    Vertices are placed evenly spaced around a circle of the given radius
    centered at the origin. With the defaults the first vertex sits at
    (1, 0) and the rest follow counter-clockwise in vertex order. The order
    can be customized using a sort key.

    Example:
        layout = CircularLayout(
            vertices=[{"id": 1}, {"id": 2}, {"id": 3}],
            edges=[(1, 2), (2, 3)],
        )
        layout.run()
    """

    def __init__(
        self,
        *,
        vertices: Optional[Sequence[VertexLike]] = None,
        edges: Optional[Sequence[EdgeLike]] = None,
        on_start: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
        # Circular-specific parameters
        radius: float = 1.0,
        start_angle: float = 0.0,
        sort_by: Optional[SortKey] = None,
    ) -> None:
        """
        Initialize Circular layout.

        Args:
            vertices: List of vertices
            edges: List of edges
            on_start: Callback for start event
            on_end: Callback for end event
            radius: Circle radius (default 1)
            start_angle: Starting angle in radians (default 0)
            sort_by: Sort key for vertex placement order. Options:
                - None: Keep original order
                - 'degree': Sort by vertex degree (descending)
                - 'label': Sort by vertex label
                - callable: Custom function taking a Vertex and returning a sort key
        """
        super().__init__(
            vertices=vertices,
            edges=edges,
            on_start=on_start,
            on_end=on_end,
        )

        self._radius: float = float(radius)
        self._start_angle: float = float(start_angle)
        self._sort_by: Optional[SortKey] = None
        self.sort_by = sort_by

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def radius(self) -> float:
        """Get circle radius."""
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        """Set circle radius."""
        self._radius = float(value)

    @property
    def start_angle(self) -> float:
        """Get starting angle in radians."""
        return self._start_angle

    @start_angle.setter
    def start_angle(self, value: float) -> None:
        """Set starting angle in radians."""
        self._start_angle = float(value)

    @property
    def sort_by(self) -> Optional[SortKey]:
        """Get sort key for vertex ordering."""
        return self._sort_by

    @sort_by.setter
    def sort_by(self, value: Optional[SortKey]) -> None:
        """
        Set sort key for vertex ordering.

        Raises:
            ValidationError: If value is a string other than 'degree' or 'label'
        """
        if isinstance(value, str) and value not in ("degree", "label"):
            raise ValidationError(f"sort_by must be 'degree', 'label' or callable, got {value!r}")
        self._sort_by = value

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _get_sorted_indices(self) -> list[int]:
        """Get vertex indices in placement order."""
        indices = list(range(len(self._vertices)))

        if self._sort_by is None:
            return indices

        if self._sort_by == "degree":
            degrees = [self._compute_degree(v.id) for v in self._vertices]
            indices.sort(key=lambda i: -degrees[i])
        elif self._sort_by == "label":
            indices.sort(key=lambda i: self._vertices[i].label)
        elif callable(self._sort_by):
            sort_fn = self._sort_by
            indices.sort(key=lambda i: sort_fn(self._vertices[i]))

        return indices

    def _compute(self, **kwargs: Any) -> list[Vector]:
        """Compute circular layout positions."""
        n = len(self._vertices)
        points = circle_points(n, radius=self._radius, start_angle=self._start_angle)

        positions: list[Vector] = [Vector(0.0, 0.0)] * n
        for point, vertex_idx in zip(points, self._get_sorted_indices()):
            positions[vertex_idx] = point
        return positions


__all__ = ["CircularLayout", "circle_points"]

"""
Render a graph as SVG elements on a circular layout.

Pipeline:
1. Lay out the vertices on the unit circle (CircularLayout defaults)
2. Associate vertex ids with their points
3. Resolve edges to segments, dropping edges with unknown endpoints
4. Build one circle marker per vertex and one line per segment
5. Scale by FIGURE_SCALE * s, move by (MARKER_OFFSET * s, s), draw
6. Append the bounding box, which uses BOX_SCALE and an unadjusted (s, s) move

The result is ordered edges, then vertex markers, then the box.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, TypeVar

from .circular import CircularLayout
from .color import BLACK, BOX_BLUE, MARKER_BLUE
from .elements import SvgElement
from .geometry import ORIGIN, DirectedSegment, Vector
from .shapes import Circle, LineSegment, Rectangle, Shape
from .types import Edge, Graph

# Figure is drawn at 80% of the box.
FIGURE_SCALE = 0.8
# Empirical x offset that keeps markers visually centered in the box. Only
# applied to markers and edges, never to the box.
MARKER_OFFSET = 0.92
BOX_SCALE = 1.2
BOX_SIZE = 2.0
# Marker radius is MARKER_SIZE / N before scaling.
MARKER_SIZE = 0.5
EDGE_WIDTH = 2.5

ShapeT = TypeVar("ShapeT", bound=Shape)


def associate(ids: Iterable[int], points: Iterable[Vector]) -> dict[int, Vector]:
    """
    Map vertex ids to points, pairing them in order.

    Stops at the shorter of the two sequences. When an id repeats, the
    first point paired with it is kept.
    """
    points_by_id: dict[int, Vector] = {}
    for vertex_id, point in zip(ids, points):
        points_by_id.setdefault(vertex_id, point)
    return points_by_id


def lookup(points_by_id: dict[int, Vector], vertex_id: int) -> Optional[Vector]:
    """Point for a vertex id, or None if the id is unknown."""
    return points_by_id.get(vertex_id)


def resolve_edges(edges: Iterable[Edge], points_by_id: dict[int, Vector]) -> list[DirectedSegment]:
    """Segments for edges whose endpoints both resolve; other edges are skipped."""
    segments = []
    for edge in edges:
        start = lookup(points_by_id, edge.source)
        end = lookup(points_by_id, edge.target)
        if start is None or end is None:
            continue
        segments.append(DirectedSegment(start, end))
    return segments


def vertex_markers(points: Sequence[Vector]) -> list[Circle]:
    """One filled circle per point, radius MARKER_SIZE / len(points)."""
    if not points:
        return []
    radius = MARKER_SIZE / len(points)
    return [Circle(point, radius, fill=MARKER_BLUE, stroke=MARKER_BLUE) for point in points]


def edge_lines(segments: Iterable[DirectedSegment]) -> list[LineSegment]:
    return [LineSegment.from_segment(seg, EDGE_WIDTH, BLACK) for seg in segments]


def transform(shape: ShapeT, scale: float) -> ShapeT:
    """Scale a marker or edge into the display box and shift it into place."""
    return shape.scale(FIGURE_SCALE * scale).move(Vector(MARKER_OFFSET * scale, scale))


def bounding_box(scale: float) -> SvgElement:
    """The frame drawn around the figure, always present."""
    box = Rectangle(ORIGIN, BOX_SIZE, BOX_SIZE, fill=BOX_BLUE, stroke=BLACK)
    return box.scale(BOX_SCALE * scale).move(Vector(scale, scale)).draw()


def render(scale: float, graph: Graph) -> list[SvgElement]:
    """
    Render a graph into SVG elements.

    Args:
        scale: Display scale; 1.0 makes the figure fill a 2x2 square
        graph: Graph to draw. Edges that reference unknown vertex ids are
            left out without an error.

    Returns:
        Edge lines, then vertex markers, then the bounding box
    """
    points = CircularLayout.from_graph(graph).run().positions
    points_by_id = associate(graph.ids, points)

    segments = resolve_edges(graph.edges, points_by_id)

    lines = [transform(line, scale).draw() for line in edge_lines(segments)]
    markers = [transform(marker, scale).draw() for marker in vertex_markers(points)]

    return lines + markers + [bounding_box(scale)]


__all__ = [
    "FIGURE_SCALE",
    "MARKER_OFFSET",
    "BOX_SCALE",
    "BOX_SIZE",
    "MARKER_SIZE",
    "EDGE_WIDTH",
    "associate",
    "lookup",
    "resolve_edges",
    "vertex_markers",
    "edge_lines",
    "transform",
    "bounding_box",
    "render",
]

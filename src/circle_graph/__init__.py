"""
circle-graph: Circular graph layout rendered as SVG shapes.

Vertices are placed evenly on the unit circle and drawn, together with
their edges and a framing box, as SVG elements inside a fixed display box.

Example:
    from circle_graph import Graph, render

    graph = Graph.from_data(vertices=[1, 2, 3], edges=[(1, 2), (2, 3), (1, 3)])
    elements = render(1.0, graph)
"""

__version__ = "0.1.0"

# Base classes for building layouts
from .base import BaseLayout, StaticLayout

# Circular layout
from .circular import CircularLayout, circle_points

# Geometry and drawing primitives
from .color import BLACK, BOX_BLUE, MARKER_BLUE, Color
from .elements import SvgElement

# Export
from .export import elements_to_svg, to_svg
from .geometry import DirectedSegment, Vector

# Render pipeline
from .render import (
    BOX_SCALE,
    FIGURE_SCALE,
    MARKER_OFFSET,
    associate,
    bounding_box,
    lookup,
    render,
    resolve_edges,
)
from .shapes import Circle, LineSegment, Rectangle
from .types import Edge, EdgeLike, Event, EventType, Graph, Vertex, VertexLike

# Validation utilities
from .validation import (
    GraphStructureWarning,
    InvalidEdgeError,
    InvalidScaleError,
    InvalidVertexError,
    ValidationError,
    validate_edge_ids,
    validate_graph,
    validate_scale,
    validate_vertex_ids,
)

__all__ = [
    # Version
    "__version__",
    # Graph model
    "Vertex",
    "Edge",
    "Graph",
    "EventType",
    "Event",
    "VertexLike",
    "EdgeLike",
    # Base classes
    "BaseLayout",
    "StaticLayout",
    # Circular layout
    "CircularLayout",
    "circle_points",
    # Geometry and drawing
    "Vector",
    "DirectedSegment",
    "Color",
    "BLACK",
    "MARKER_BLUE",
    "BOX_BLUE",
    "Circle",
    "Rectangle",
    "LineSegment",
    "SvgElement",
    # Rendering
    "FIGURE_SCALE",
    "MARKER_OFFSET",
    "BOX_SCALE",
    "associate",
    "lookup",
    "resolve_edges",
    "bounding_box",
    "render",
    # Export
    "to_svg",
    "elements_to_svg",
    # Validation
    "ValidationError",
    "InvalidScaleError",
    "InvalidVertexError",
    "InvalidEdgeError",
    "GraphStructureWarning",
    "validate_scale",
    "validate_vertex_ids",
    "validate_edge_ids",
    "validate_graph",
]

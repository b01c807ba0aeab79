"""
SVG export for rendered graphs.

Wraps the elements produced by ``circle_graph.render.render`` in a standalone
SVG document whose viewBox is the rendered bounding box.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence
from xml.sax.saxutils import escape

from ..elements import format_number
from ..render import render
from ..validation import validate_scale

if TYPE_CHECKING:
    from ..elements import SvgElement
    from ..types import Graph

_GROUP_CLASSES = {
    "line": "edges",
    "circle": "nodes",
    "rect": "frame",
}


def to_svg(
    scale: float,
    graph: Graph,
    *,
    background: Optional[str] = None,
    precision: int = 4,
) -> str:
    """
    Render a graph and export it to SVG format.

    Args:
        scale: Display scale; 1.0 makes the figure fill a 2x2 square
        graph: Graph to draw
        background: Background color (default None for transparent)
        precision: Decimal places for coordinates (default 4)

    Returns:
        SVG string representation of the graph

    Raises:
        InvalidScaleError: If scale is not positive and finite
    """
    scale = validate_scale(scale)
    return elements_to_svg(render(scale, graph), background=background, precision=precision)


def elements_to_svg(
    elements: Sequence[SvgElement],
    *,
    background: Optional[str] = None,
    precision: int = 4,
) -> str:
    """
    Export rendered elements to an SVG document.

    Consecutive elements of the same kind share a ``<g>`` group (edges,
    nodes, frame) and element order is preserved. The viewBox is taken from
    the last rect element, which render() always emits as the bounding box;
    without one it falls back to the extent of the elements.

    Args:
        elements: Elements in paint order
        background: Background color (default None for transparent)
        precision: Decimal places for coordinates (default 4)

    Returns:
        SVG string
    """
    x, y, width, height = _view_box(elements)

    def fmt(value: float) -> str:
        return format_number(value, precision)

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{fmt(width)}" height="{fmt(height)}" '
        f'viewBox="{fmt(x)} {fmt(y)} {fmt(width)} {fmt(height)}">'
    ]

    if background:
        svg_parts.append(
            f'  <rect x="{fmt(x)}" y="{fmt(y)}" width="100%" height="100%" '
            f'fill="{escape(background)}"/>'
        )

    current: Optional[str] = None
    for element in elements:
        group = _GROUP_CLASSES.get(element.tag, "shapes")
        if group != current:
            if current is not None:
                svg_parts.append("  </g>")
            svg_parts.append(f'  <g class="{group}">')
            current = group
        svg_parts.append("    " + element.to_markup(precision))
    if current is not None:
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _view_box(elements: Sequence[SvgElement]) -> tuple[float, float, float, float]:
    """Get (x, y, width, height) covering the drawing."""
    for element in reversed(elements):
        if element.tag == "rect":
            return (
                float(element["x"]),
                float(element["y"]),
                float(element["width"]),
                float(element["height"]),
            )

    xs: list[float] = []
    ys: list[float] = []
    for element in elements:
        if element.tag == "circle":
            cx, cy, r = float(element["cx"]), float(element["cy"]), float(element["r"])
            xs += [cx - r, cx + r]
            ys += [cy - r, cy + r]
        elif element.tag == "line":
            xs += [float(element["x1"]), float(element["x2"])]
            ys += [float(element["y1"]), float(element["y2"])]

    if not xs:
        return (0.0, 0.0, 1.0, 1.0)

    width = max(xs) - min(xs) or 1.0
    height = max(ys) - min(ys) or 1.0
    return (min(xs), min(ys), width, height)


__all__ = [
    "to_svg",
    "elements_to_svg",
]

"""
Export functionality for rendered graphs.

Example usage:
    from circle_graph import Graph
    from circle_graph.export import to_svg

    graph = Graph.from_data(
        vertices=[{"id": i} for i in range(5)],
        edges=[(i, (i + 1) % 5) for i in range(5)],
    )

    svg_content = to_svg(100.0, graph)
    with open("graph.svg", "w") as f:
        f.write(svg_content)
"""

from .svg import elements_to_svg, to_svg

__all__ = [
    "to_svg",
    "elements_to_svg",
]

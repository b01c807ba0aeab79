#!/usr/bin/env python3
"""
HTML/SVG showcase of circular graph rendering.

Renders a handful of structured and random graphs and writes one SVG file
per graph plus an HTML page that shows them side by side.

Usage:
    uv run python scripts/showcase.py

Output:
    build/showcase.html
    build/<graph>.svg
"""

from __future__ import annotations

import random
from html import escape
from pathlib import Path

from circle_graph import Graph
from circle_graph.export import to_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

# Pixels per unit; the rendered box is 2.4 * SCALE wide
SCALE = 150.0


def generate_erdos_renyi(n: int, p: float, seed: int = 42) -> Graph:
    """Generate Erdos-Renyi random graph."""
    random.seed(seed)
    edges = [(i, j) for i in range(n) for j in range(i + 1, n) if random.random() < p]
    return Graph.from_data(vertices=list(range(n)), edges=edges)


def generate_complete_graph(n: int) -> Graph:
    """Generate K_n."""
    edges = [(i, j) for i in range(n) for j in range(i + 1, n)]
    return Graph.from_data(vertices=list(range(n)), edges=edges)


def generate_cycle_graph(n: int) -> Graph:
    """Generate C_n."""
    return Graph.from_data(vertices=list(range(n)), edges=[(i, (i + 1) % n) for i in range(n)])


def generate_petersen_graph() -> Graph:
    """Generate the Petersen graph (famous non-random graph)."""
    edges = [
        # Outer pentagon
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
        # Inner pentagram (skip-2 connections)
        (5, 7), (7, 9), (9, 6), (6, 8), (8, 5),
        # Spokes connecting outer to inner
        (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
    ]  # fmt: skip
    return Graph.from_data(vertices=list(range(10)), edges=edges)


def generate_html(items: list[tuple[str, str]]) -> str:
    """Generate the HTML page."""
    cards = "\n".join(
        f'    <figure>\n      {svg}\n      <figcaption>{escape(name)}</figcaption>\n    </figure>'
        for name, svg in items
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Circular Graph Showcase</title>
  <style>
    body {{ font-family: sans-serif; background: #f0f0f0; }}
    main {{ display: flex; flex-wrap: wrap; gap: 1.5rem; padding: 2rem; }}
    figure {{ background: white; padding: 1rem; border-radius: 8px; }}
    figcaption {{ text-align: center; margin-top: 0.5rem; }}
  </style>
</head>
<body>
  <main>
{cards}
  </main>
</body>
</html>
"""


def main() -> None:
    """Render all graphs and write the showcase."""
    BUILD_DIR.mkdir(exist_ok=True)

    graphs = {
        "triangle": generate_complete_graph(3),
        "k6": generate_complete_graph(6),
        "cycle-12": generate_cycle_graph(12),
        "petersen": generate_petersen_graph(),
        "random-16": generate_erdos_renyi(16, 0.2),
        "empty": Graph(),
    }

    items = []
    for name, graph in graphs.items():
        print(f"  Rendering {name}...")
        svg = to_svg(SCALE, graph, background="white")
        (BUILD_DIR / f"{name}.svg").write_text(svg)
        items.append((name, svg))

    output_path = BUILD_DIR / "showcase.html"
    output_path.write_text(generate_html(items))
    print(f"\nShowcase saved to: {output_path.absolute()}")


if __name__ == "__main__":
    main()

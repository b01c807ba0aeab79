"""
Input validation utilities for circular graph rendering.

The render pipeline itself never validates a graph: edges that reference
unknown vertex ids are dropped without a diagnostic. Callers that care about
well-formedness use the functions here, which either raise descriptive
exceptions (strict mode) or report the issues as warnings.
"""

from __future__ import annotations

import math
import warnings
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from .types import Edge, Graph, Vertex


class ValidationError(ValueError):
    """Base exception for validation errors."""

    pass


class InvalidScaleError(ValidationError):
    """Raised when a render scale is not a positive finite number."""

    pass


class InvalidVertexError(ValidationError):
    """Raised when a vertex id is duplicated or not an integer."""

    pass


class InvalidEdgeError(ValidationError):
    """Raised when an edge endpoint is unknown or not an integer."""

    pass


class GraphStructureWarning(UserWarning):
    """Warning for graphs that render, but not as the caller may expect."""

    pass


def validate_scale(scale: float) -> float:
    """
    Validate a render scale.

    Args:
        scale: Scale factor (1.0 fills a 2x2 square)

    Returns:
        Validated scale as float

    Raises:
        InvalidScaleError: If scale is not positive and finite
    """
    value = float(scale)
    if not math.isfinite(value):
        raise InvalidScaleError(f"Scale must be finite, got {scale}")
    if value <= 0:
        raise InvalidScaleError(f"Scale must be positive, got {scale}")
    return value


def validate_count(count: int) -> int:
    """
    Validate a vertex count.

    Raises:
        ValidationError: If count < 0
    """
    if count < 0:
        raise ValidationError(f"Vertex count must be >= 0, got {count}")
    return count


def validate_vertex_ids(
    vertices: Sequence[Vertex],
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Check that vertex ids are unique.

    Args:
        vertices: Vertices in graph order
        strict: If True, raises on duplicates. If False, returns list of issues.

    Returns:
        List of (vertex_position, issue_description) tuples

    Raises:
        InvalidVertexError: If strict=True and duplicate ids found
    """
    issues: list[tuple[int, str]] = []
    seen: set[int] = set()

    for i, vertex in enumerate(vertices):
        if vertex.id in seen:
            issues.append((i, f"Vertex {i}: duplicate id {vertex.id}"))
        seen.add(vertex.id)

    if strict and issues:
        msg = "Duplicate vertex ids:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidVertexError(msg)

    return issues


def validate_edge_ids(
    edges: Sequence[Edge],
    vertex_ids: Iterable[int],
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Check that every edge endpoint names an existing vertex.

    Args:
        edges: Edges in graph order
        vertex_ids: Known vertex ids
        strict: If True, raises on unknown ids. If False, returns list of issues.

    Returns:
        List of (edge_position, issue_description) tuples

    Raises:
        InvalidEdgeError: If strict=True and unknown ids found
    """
    known = set(vertex_ids)
    issues: list[tuple[int, str]] = []

    for i, edge in enumerate(edges):
        if edge.source not in known:
            issues.append((i, f"Edge {i}: unknown source id {edge.source}"))
        if edge.target not in known:
            issues.append((i, f"Edge {i}: unknown target id {edge.target}"))

    if strict and issues:
        msg = "Invalid edge endpoints:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidEdgeError(msg)

    return issues


def validate_graph(graph: Graph, strict: bool = True) -> list[tuple[int, str]]:
    """
    Validate vertex ids and edge endpoints of a graph.

    In non-strict mode every issue is reported as a GraphStructureWarning
    and the combined issue list is returned.

    Args:
        graph: Graph to check
        strict: If True, raises on the first kind of problem found

    Returns:
        List of (position, issue_description) tuples

    Raises:
        InvalidVertexError: If strict=True and vertex ids repeat
        InvalidEdgeError: If strict=True and an edge has an unknown endpoint
    """
    issues = validate_vertex_ids(graph.vertices, strict=strict)
    issues += validate_edge_ids(graph.edges, graph.ids, strict=strict)

    for _, message in issues:
        warnings.warn(message, GraphStructureWarning, stacklevel=2)

    return issues


__all__ = [
    "ValidationError",
    "InvalidScaleError",
    "InvalidVertexError",
    "InvalidEdgeError",
    "GraphStructureWarning",
    "validate_scale",
    "validate_count",
    "validate_vertex_ids",
    "validate_edge_ids",
    "validate_graph",
]

"""
Common types for circular graph rendering.

This module provides the graph model consumed by the layout and render
pipeline:
- Vertex: Graph vertex with an integer id and an optional label
- Edge: Ordered pair of vertex ids
- Graph: Vertices plus edges
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional, Sequence, TypedDict, Union

from .validation import InvalidEdgeError, InvalidVertexError


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout computation has begun
    - end: Positions are available
    """

    start = 0
    end = 1


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    count: int


@dataclass(frozen=True)
class Vertex:
    """
    Graph vertex.

    Attributes:
        id: Identifier referenced by edges
        label: Display label (carried along, not used for placement)
    """

    id: int
    label: str = ""


@dataclass(frozen=True)
class Edge:
    """
    Directed edge between two vertex ids.

    Attributes:
        source: Id of the start vertex
        target: Id of the end vertex
    """

    source: int
    target: int

    def is_loop(self) -> bool:
        """Check if the edge starts and ends at the same vertex."""
        return self.source == self.target


@dataclass(frozen=True)
class Graph:
    """
    Vertices plus edges.

    Ids are not required to be unique and edges may reference ids that are
    not present; see ``circle_graph.validation`` for explicit checks.
    """

    vertices: tuple[Vertex, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "edges", tuple(self.edges))

    @property
    def ids(self) -> list[int]:
        """Vertex ids in vertex-list order."""
        return [v.id for v in self.vertices]

    def __len__(self) -> int:
        return len(self.vertices)

    @classmethod
    def from_data(
        cls,
        vertices: Optional[Sequence[VertexLike]] = None,
        edges: Optional[Sequence[EdgeLike]] = None,
    ) -> Graph:
        """
        Build a graph from loosely typed input.

        Args:
            vertices: Vertex objects, dicts with ``id``/``label`` keys,
                bare ints, or objects with ``id``/``label`` attributes
            edges: Edge objects, dicts with ``source``/``target`` keys,
                2-tuples, or objects with ``source``/``target`` attributes

        Returns:
            A new Graph
        """
        return cls(
            vertices=tuple(to_vertex(v) for v in vertices or ()),
            edges=tuple(to_edge(e) for e in edges or ()),
        )


def to_vertex(data: VertexLike) -> Vertex:
    """
    Normalize a vertex-like value into a Vertex.

    Raises:
        InvalidVertexError: If the id is not an integer
    """
    if isinstance(data, Vertex):
        return data
    if isinstance(data, dict):
        return Vertex(_vertex_id(data["id"]), str(data.get("label", "")))
    if isinstance(data, numbers.Number):
        return Vertex(_vertex_id(data))
    return Vertex(_vertex_id(getattr(data, "id")), str(getattr(data, "label", "")))


def to_edge(data: EdgeLike) -> Edge:
    """
    Normalize an edge-like value into an Edge.

    Raises:
        InvalidEdgeError: If an endpoint id is not an integer
    """
    if isinstance(data, Edge):
        return data
    if isinstance(data, dict):
        return Edge(_edge_id(data["source"]), _edge_id(data["target"]))
    if isinstance(data, (tuple, list)):
        source, target = data
        return Edge(_edge_id(source), _edge_id(target))
    return Edge(_edge_id(getattr(data, "source")), _edge_id(getattr(data, "target")))


def _vertex_id(value: Any) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise InvalidVertexError(f"Vertex id must be an integer, got {value!r}")
    return int(value)


def _edge_id(value: Any) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise InvalidEdgeError(f"Edge endpoint must be an integer vertex id, got {value!r}")
    return int(value)


# Type aliases for loosely typed input
VertexLike = Union[Vertex, dict[str, Any], int, Any]
"""Input type for vertices: Vertex objects, dicts, ints, or objects with id/label."""

EdgeLike = Union[Edge, dict[str, Any], tuple[int, int], Any]
"""Input type for edges: Edge objects, dicts, pairs, or objects with source/target."""

EventCallback = Callable[[Optional[Event]], None]


__all__ = [
    "EventType",
    "Event",
    "EventCallback",
    "Vertex",
    "Edge",
    "Graph",
    "to_vertex",
    "to_edge",
    "VertexLike",
    "EdgeLike",
]

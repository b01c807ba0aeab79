"""
Base classes for graph layouts.

This module provides the common interface shared by layout algorithms:

- BaseLayout: Abstract base with event system and vertex/edge management
- StaticLayout: Single-pass layouts that compute all positions at once
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .geometry import Vector
from .types import (
    Edge,
    EdgeLike,
    Event,
    EventCallback,
    EventType,
    Graph,
    Vertex,
    VertexLike,
    to_edge,
    to_vertex,
)
from .validation import validate_graph


class BaseLayout(ABC):
    """
    Abstract base class for layouts.

    Provides shared infrastructure:
    - Event system (start/end events)
    - Vertex/edge management via properties
    - Access to computed positions

    Example:
        layout = SomeLayout(
            vertices=[{"id": 1}, {"id": 2}],
            edges=[(1, 2)],
        ).run()

        for vertex, point in zip(layout.vertices, layout.positions):
            print(f"Vertex {vertex.id}: ({point.x}, {point.y})")
    """

    def __init__(
        self,
        *,
        vertices: Optional[Sequence[VertexLike]] = None,
        edges: Optional[Sequence[EdgeLike]] = None,
        on_start: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            vertices: Vertices (Vertex objects, dicts, ints, or objects with id/label)
            edges: Edges (Edge objects, dicts, or (source, target) pairs)
            on_start: Callback for start event
            on_end: Callback for end event
        """
        self._vertices: list[Vertex] = []
        self._edges: list[Edge] = []
        self._positions: list[Vector] = []
        self._events: dict[EventType, EventCallback] = {}

        if vertices is not None:
            self.vertices = vertices
        if edges is not None:
            self.edges = edges

        if on_start:
            self._events[EventType.start] = on_start
        if on_end:
            self._events[EventType.end] = on_end

    @classmethod
    def from_graph(cls, graph: Graph, **kwargs: Any) -> Self:
        """Create a layout for the vertices and edges of a Graph."""
        return cls(vertices=graph.vertices, edges=graph.edges, **kwargs)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def vertices(self) -> list[Vertex]:
        """Get the list of vertices."""
        return self._vertices

    @vertices.setter
    def vertices(self, value: Sequence[VertexLike]) -> None:
        """Set vertices from a sequence of vertex-like values."""
        self._vertices = [to_vertex(v) for v in value]
        self._positions = []

    @property
    def edges(self) -> list[Edge]:
        """Get the list of edges."""
        return self._edges

    @edges.setter
    def edges(self, value: Sequence[EdgeLike]) -> None:
        """Set edges from a sequence of edge-like values."""
        self._edges = [to_edge(e) for e in value]

    @property
    def positions(self) -> list[Vector]:
        """Computed positions, one per vertex in vertex order (empty before run())."""
        return self._positions

    @property
    def graph(self) -> Graph:
        """Current vertices and edges as a Graph."""
        return Graph(tuple(self._vertices), tuple(self._edges))

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: EventCallback) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate current configuration.

        Checks vertex ids are unique and every edge references a known id.
        Never called by run(), which tolerates both; call it explicitly for
        fail-fast behavior.

        Returns:
            self (for chaining)

        Raises:
            InvalidVertexError: If vertex ids repeat.
            InvalidEdgeError: If an edge references an unknown vertex id.
        """
        validate_graph(self.graph, strict=True)
        return self

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Returns:
            self (for chaining)
        """
        pass

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _compute_degree(self, vertex_id: int) -> int:
        """Count edge endpoints at a vertex id (self-loops count twice)."""
        degree = 0
        for edge in self._edges:
            if edge.source == vertex_id:
                degree += 1
            if edge.target == vertex_id:
                degree += 1
        return degree


class StaticLayout(BaseLayout):
    """
    Base class for single-pass layouts.

    Example:
        layout = CircularLayout(
            vertices=vertices,
            edges=edges,
            radius=1.0,
        )
        layout.run()
    """

    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Fires start event, computes positions, fires end event.

        Args:
            **kwargs: Additional arguments passed to _compute()

        Returns:
            self (for chaining)
        """
        self.trigger({"type": EventType.start, "count": len(self._vertices)})

        self._positions = self._compute(**kwargs)

        self.trigger({"type": EventType.end, "count": len(self._positions)})
        return self

    @abstractmethod
    def _compute(self, **kwargs: Any) -> list[Vector]:
        """
        Compute vertex positions.

        Subclasses return one position per vertex, in vertex order.
        """
        pass


__all__ = [
    "BaseLayout",
    "StaticLayout",
]

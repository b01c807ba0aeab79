"""Tests for input validation module."""

import math
import warnings

import pytest

from circle_graph import Edge, Graph, Vertex
from circle_graph.validation import (
    GraphStructureWarning,
    InvalidEdgeError,
    InvalidScaleError,
    InvalidVertexError,
    ValidationError,
    validate_count,
    validate_edge_ids,
    validate_graph,
    validate_scale,
    validate_vertex_ids,
)


class TestScaleValidation:
    """Tests for scale validation."""

    def test_valid_scale(self):
        """Valid scale is returned as float."""
        assert validate_scale(2) == 2.0

    def test_zero_raises(self):
        with pytest.raises(InvalidScaleError, match="must be positive"):
            validate_scale(0)

    def test_negative_raises(self):
        with pytest.raises(InvalidScaleError, match="must be positive"):
            validate_scale(-1.5)

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite_raises(self, value):
        with pytest.raises(InvalidScaleError, match="must be finite"):
            validate_scale(value)

    def test_is_validation_error(self):
        """All errors derive from ValidationError (and ValueError)."""
        assert issubclass(InvalidScaleError, ValidationError)
        assert issubclass(ValidationError, ValueError)


class TestCountValidation:
    """Tests for vertex count validation."""

    def test_zero_ok(self):
        assert validate_count(0) == 0

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match=">= 0"):
            validate_count(-3)


class TestVertexValidation:
    """Tests for vertex id uniqueness."""

    def test_unique_ids(self):
        assert validate_vertex_ids([Vertex(1), Vertex(2)]) == []

    def test_duplicate_raises(self):
        with pytest.raises(InvalidVertexError, match="duplicate id 1"):
            validate_vertex_ids([Vertex(1), Vertex(2), Vertex(1)])

    def test_non_strict_returns_issues(self):
        issues = validate_vertex_ids([Vertex(1), Vertex(1), Vertex(1)], strict=False)
        assert [i for i, _ in issues] == [1, 2]


class TestEdgeValidation:
    """Tests for edge endpoint validation."""

    def test_valid_edges(self):
        assert validate_edge_ids([Edge(1, 2), Edge(2, 2)], [1, 2]) == []

    def test_unknown_target_raises(self):
        with pytest.raises(InvalidEdgeError, match="unknown target id 99"):
            validate_edge_ids([Edge(1, 99)], [1, 2])

    def test_unknown_source_raises(self):
        with pytest.raises(InvalidEdgeError, match="unknown source id 0"):
            validate_edge_ids([Edge(0, 1)], [1, 2])

    def test_non_strict_reports_both_endpoints(self):
        issues = validate_edge_ids([Edge(7, 8)], [1], strict=False)
        assert len(issues) == 2
        assert all(i == 0 for i, _ in issues)


class TestGraphValidation:
    """Tests for validate_graph."""

    def test_valid_graph(self):
        graph = Graph.from_data(vertices=[1, 2, 3], edges=[(1, 2), (2, 3)])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert validate_graph(graph) == []

    def test_strict_raises(self):
        graph = Graph.from_data(vertices=[1, 2], edges=[(1, 2), (1, 99)])
        with pytest.raises(InvalidEdgeError):
            validate_graph(graph)

    def test_strict_duplicate_raises(self):
        graph = Graph.from_data(vertices=[1, 1])
        with pytest.raises(InvalidVertexError):
            validate_graph(graph)

    def test_non_strict_warns(self):
        graph = Graph.from_data(vertices=[1, 1], edges=[(1, 99)])
        with pytest.warns(GraphStructureWarning) as record:
            issues = validate_graph(graph, strict=False)
        assert len(issues) == 2
        assert len(record) == 2

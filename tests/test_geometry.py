"""Tests for vectors, colors, shapes and SVG elements."""

import math

import pytest

from circle_graph.color import BLACK, MARKER_BLUE, Color
from circle_graph.elements import SvgElement, format_number
from circle_graph.geometry import ORIGIN, UNIT_X, DirectedSegment, Vector
from circle_graph.shapes import Circle, LineSegment, Rectangle


class TestVector:
    """Tests for Vector."""

    def test_arithmetic(self):
        a = Vector(1.0, 2.0)
        b = Vector(3.0, -1.0)
        assert a + b == Vector(4.0, 1.0)
        assert b - a == Vector(2.0, -3.0)
        assert a * 2 == Vector(2.0, 4.0)
        assert 2 * a == Vector(2.0, 4.0)
        assert -a == Vector(-1.0, -2.0)

    def test_rotate_quarter_turn(self):
        v = UNIT_X.rotate(math.pi / 2)
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(1.0)

    def test_rotate_preserves_norm(self):
        v = Vector(3.0, 4.0)
        assert v.rotate(1.234).norm() == pytest.approx(5.0)

    def test_angle(self):
        assert Vector(0.0, -2.0).angle() == pytest.approx(-math.pi / 2)

    def test_as_tuple(self):
        assert Vector(1.5, 2.5).as_tuple() == (1.5, 2.5)


class TestDirectedSegment:
    """Tests for DirectedSegment."""

    def test_length(self):
        assert DirectedSegment(ORIGIN, Vector(3.0, 4.0)).length == pytest.approx(5.0)

    def test_degenerate(self):
        assert DirectedSegment(UNIT_X, UNIT_X).is_degenerate()
        assert not DirectedSegment(ORIGIN, UNIT_X).is_degenerate()


class TestColor:
    """Tests for Color."""

    def test_to_css(self):
        assert MARKER_BLUE.to_css() == "rgba(0,50,255,0.8)"
        assert BLACK.to_css() == "rgba(0,0,0,1)"
        assert str(Color(1, 2, 3, 0.25)) == "rgba(1,2,3,0.25)"

    def test_default_alpha_opaque(self):
        assert Color(10, 20, 30).alpha == 1.0

    def test_channel_out_of_range(self):
        with pytest.raises(ValueError, match="green"):
            Color(0, 256, 0)

    def test_alpha_out_of_range(self):
        with pytest.raises(ValueError, match="alpha"):
            Color(0, 0, 0, 1.5)


class TestShapes:
    """Tests for shape scale/move/draw."""

    def test_circle_scale_and_move(self):
        c = Circle(Vector(1.0, 0.0), 0.25, fill=MARKER_BLUE, stroke=BLACK)
        result = c.scale(2.0).move(Vector(1.0, 1.0))
        assert result.center == Vector(3.0, 1.0)
        assert result.radius == 0.5
        # original untouched
        assert c.center == Vector(1.0, 0.0)

    def test_circle_draw(self):
        element = Circle(Vector(1.0, 2.0), 0.5, fill=MARKER_BLUE, stroke=BLACK).draw()
        assert element.tag == "circle"
        assert element.attributes == {
            "cx": 1.0,
            "cy": 2.0,
            "r": 0.5,
            "fill": "rgba(0,50,255,0.8)",
            "stroke": "rgba(0,0,0,1)",
        }

    def test_rectangle_draw_uses_top_left(self):
        rect = Rectangle(ORIGIN, 2.0, 2.0, fill=MARKER_BLUE, stroke=BLACK)
        element = rect.scale(1.5).move(Vector(1.0, 1.0)).draw()
        assert element["x"] == pytest.approx(-0.5)
        assert element["y"] == pytest.approx(-0.5)
        assert element["width"] == pytest.approx(3.0)
        assert element["height"] == pytest.approx(3.0)

    def test_line_width_not_scaled(self):
        line = LineSegment(ORIGIN, UNIT_X, 2.5, BLACK).scale(10.0)
        assert line.end == Vector(10.0, 0.0)
        assert line.width == 2.5

    def test_line_move(self):
        line = LineSegment(ORIGIN, UNIT_X, 1.0, BLACK).move(Vector(0.0, 2.0))
        element = line.draw()
        assert (element["x1"], element["y1"], element["x2"], element["y2"]) == (0.0, 2.0, 1.0, 2.0)
        assert element["stroke-width"] == 1.0


class TestSvgElement:
    """Tests for element markup."""

    def test_to_markup(self):
        element = SvgElement("circle", {"cx": 1.0, "cy": 0.5, "r": 0.125, "fill": "red"})
        assert element.to_markup() == '<circle cx="1" cy="0.5" r="0.125" fill="red"/>'

    def test_precision(self):
        element = SvgElement("line", {"x1": 1 / 3})
        assert element.to_markup(precision=2) == '<line x1="0.33"/>'

    def test_attribute_escaping(self):
        element = SvgElement("rect", {"fill": 'a"<b'})
        assert element.to_markup() == "<rect fill='a\"&lt;b'/>"

    def test_get(self):
        element = SvgElement("rect", {"x": 1.0})
        assert element.get("x") == 1.0
        assert element.get("y") is None

    def test_attributes_read_only(self):
        element = SvgElement("circle", {"cx": 0.0})
        with pytest.raises(TypeError):
            element.attributes["cx"] = 1.0
        assert element["cx"] == 0.0

    def test_input_dict_copied(self):
        attrs = {"cx": 0.0}
        element = SvgElement("circle", attrs)
        attrs["cx"] = 5.0
        assert element["cx"] == 0.0

    def test_hashable(self):
        a = SvgElement("circle", {"cx": 1.0, "r": 0.5})
        b = SvgElement("circle", {"cx": 1.0, "r": 0.5})
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b, SvgElement("rect")}) == 2

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.0, "1"),
            (-0.00001, "0"),
            (2.5, "2.5"),
            (100.0, "100"),
            (3, "3"),
            ("rgba(0,0,0,1)", "rgba(0,0,0,1)"),
        ],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

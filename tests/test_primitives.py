"""
Tests for the Pydantic primitives in models.

Tests cover:
- Validation (valid and invalid data)
- Immutability (frozen models)
- Parsing helpers
"""

import pytest
from pydantic import ValidationError

from models import Color, CoordinateFrame, FramedPoint, Point2D, Resolution


# ============================================================================
# Point Tests
# ============================================================================


class TestPoint2D:
    """Test Point2D model."""

    def test_valid_point(self):
        point = Point2D(x=100.0, y=-200.5)
        assert point.x == 100.0
        assert point.y == -200.5

    def test_int_coercion(self):
        point = Point2D(x=1, y=2)
        assert isinstance(point.x, float)

    def test_frozen(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), float('-inf')])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError):
            Point2D(x=value, y=0.0)

    def test_str(self):
        assert str(Point2D(x=1.0, y=2.5)) == "Point2D(x=1.00, y=2.50)"


class TestFramedPoint:
    """Test FramedPoint model."""

    def test_helpers_set_frame(self):
        assert FramedPoint.physics(1.0, 2.0).frame == CoordinateFrame.PHYSICS
        assert FramedPoint.screen(1.0, 2.0).frame == CoordinateFrame.SCREEN

    def test_frame_from_string(self):
        point = FramedPoint(x=0.0, y=0.0, frame="css_percent")
        assert point.frame == CoordinateFrame.CSS_PERCENT

    def test_unknown_frame(self):
        with pytest.raises(ValidationError):
            FramedPoint(x=0.0, y=0.0, frame="world")

    def test_frame_is_part_of_equality(self):
        assert FramedPoint.physics(1.0, 2.0) != FramedPoint.screen(1.0, 2.0)

    def test_as_tuple(self):
        assert FramedPoint.screen(3.0, 4.0).as_tuple == (3.0, 4.0)

    def test_is_a_point(self):
        assert isinstance(FramedPoint.physics(0.0, 0.0), Point2D)


# ============================================================================
# Resolution Tests
# ============================================================================


class TestResolution:
    """Test Resolution model."""

    def test_aspect_ratio(self):
        assert Resolution(width=1920, height=1080).aspect_ratio == pytest.approx(16 / 9)

    @pytest.mark.parametrize("width,height", [(0, 100), (100, -5)])
    def test_positive_dimensions(self, width, height):
        with pytest.raises(ValidationError):
            Resolution(width=width, height=height)

    def test_parse(self):
        assert Resolution.parse("1280x720") == Resolution(width=1280, height=720)
        assert Resolution.parse("800X600") == Resolution(width=800, height=600)

    @pytest.mark.parametrize("text", ["1280", "axb", "1280x720x3", "0x720"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError) as exc_info:
            Resolution.parse(text)
        assert "expected WIDTHxHEIGHT" in str(exc_info.value)


# ============================================================================
# Color Tests
# ============================================================================


class TestColor:
    """Test Color model."""

    def test_default_alpha(self):
        assert Color(r=1, g=2, b=3).a == 255

    @pytest.mark.parametrize("component", ['r', 'g', 'b', 'a'])
    def test_out_of_range(self, component):
        values = {'r': 0, 'g': 0, 'b': 0, 'a': 255}
        values[component] = 256
        with pytest.raises(ValidationError) as exc_info:
            Color(**values)
        assert "Color component must be in range [0, 255]" in str(exc_info.value)

    def test_from_hex(self):
        assert Color.from_hex("#f97316") == Color(r=249, g=115, b=22)
        assert Color.from_hex("0f172a80").a == 128

    def test_from_hex_invalid(self):
        with pytest.raises(ValueError):
            Color.from_hex("#fff")

    def test_rgb_tuple(self):
        assert Color(r=10, g=20, b=30, a=40).as_rgb_tuple == (10, 20, 30)

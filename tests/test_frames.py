"""
Tests for the coordinate-frame adapter.

Tests cover:
- Conversion of each host frame to and from the physics frame
- Round trips through every frame
- Refusal of untagged or wrongly tagged points
"""

import pytest
from pydantic import ValidationError

from models import CoordinateFrame, FramedPoint, Point2D, Resolution
from toss.frames import ContainerFrame, FrameMismatchError


class TestToPhysics:
    """Host frames into the physics frame."""

    def test_screen_flips_y(self, container):
        """Test screen y is measured down from the top, physics y up from the bottom."""
        point = container.to_physics(FramedPoint.screen(100.0, 365.0))
        assert point.frame == CoordinateFrame.PHYSICS
        assert (point.x, point.y) == (100.0, 35.0)

    def test_css_bottom_keeps_values(self, container):
        """Test CSS bottom offsets are already measured upward."""
        point = container.to_physics(FramedPoint(x=120.0, y=80.0, frame=CoordinateFrame.CSS_BOTTOM))
        assert (point.x, point.y) == (120.0, 80.0)
        assert point.frame == CoordinateFrame.PHYSICS

    def test_css_percent_scales(self, container):
        """Test percentages scale by the container size."""
        point = container.to_physics(FramedPoint(x=50.0, y=25.0, frame=CoordinateFrame.CSS_PERCENT))
        assert (point.x, point.y) == pytest.approx((400.0, 100.0))

    def test_physics_passes_through(self, container):
        point = FramedPoint.physics(1.0, 2.0)
        assert container.to_physics(point) is point

    def test_untagged_point_refused(self, container):
        """Test a raw Point2D cannot be converted."""
        with pytest.raises(TypeError):
            container.to_physics(Point2D(x=1.0, y=2.0))


class TestFromPhysics:
    """Physics frame back to host frames."""

    def test_to_screen(self, container):
        point = container.from_physics(FramedPoint.physics(300.0, 30.0), CoordinateFrame.SCREEN)
        assert (point.x, point.y) == (300.0, 370.0)
        assert point.frame == CoordinateFrame.SCREEN

    def test_to_percent(self, container):
        point = container.from_physics(FramedPoint.physics(200.0, 300.0), CoordinateFrame.CSS_PERCENT)
        assert (point.x, point.y) == pytest.approx((25.0, 75.0))

    def test_requires_physics_input(self, container):
        """Test a host-frame sample cannot be converted as if it were physics."""
        with pytest.raises(FrameMismatchError) as exc_info:
            container.from_physics(FramedPoint.screen(1.0, 2.0), CoordinateFrame.SCREEN)
        assert exc_info.value.expected == CoordinateFrame.PHYSICS
        assert exc_info.value.got == CoordinateFrame.SCREEN
        assert isinstance(exc_info.value, ValueError)

    def test_untagged_point_refused(self, container):
        """Test a raw Point2D cannot be converted back to a host frame."""
        with pytest.raises(TypeError):
            container.from_physics(Point2D(x=1.0, y=2.0), CoordinateFrame.SCREEN)

    @pytest.mark.parametrize("frame", list(CoordinateFrame))
    def test_round_trip(self, container, frame):
        """Test converting out and back returns the original position."""
        original = FramedPoint.physics(123.0, 321.0)
        back = container.to_physics(container.from_physics(original, frame))
        assert (back.x, back.y) == pytest.approx((123.0, 321.0))


class TestConvert:
    """Direct conversion between host frames."""

    def test_screen_to_percent(self, container):
        point = container.convert(FramedPoint.screen(400.0, 300.0), CoordinateFrame.CSS_PERCENT)
        assert (point.x, point.y) == pytest.approx((50.0, 25.0))
        assert point.frame == CoordinateFrame.CSS_PERCENT

    def test_tag(self, container):
        tagged = container.tag(Point2D(x=5.0, y=6.0), CoordinateFrame.SCREEN)
        assert tagged == FramedPoint.screen(5.0, 6.0)


class TestContainerFrame:
    """ContainerFrame construction."""

    @pytest.mark.parametrize("width,height", [(0, 400), (800, -1)])
    def test_positive_size(self, width, height):
        with pytest.raises(ValidationError):
            ContainerFrame(width=width, height=height)

    def test_from_resolution(self):
        frame = ContainerFrame.from_resolution(Resolution(width=1280, height=720))
        assert (frame.width, frame.height) == (1280, 720)
        assert str(frame) == "ContainerFrame(1280x720)"

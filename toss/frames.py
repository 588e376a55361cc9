"""
Coordinate-frame adapter.

Host surfaces place elements in several conventions (pygame's top-left
origin, CSS ``bottom`` offsets, CSS percentages). The trajectory code only
ever sees the physics frame: origin at the container's bottom-left, y up.
ContainerFrame is the single place where values cross between the two, and
it converts whole points so both coordinates always move together.

Examples:
    >>> from models import FramedPoint
    >>> container = ContainerFrame(width=800, height=400)
    >>> container.to_physics(FramedPoint.screen(100.0, 365.0))
    FramedPoint(x=100.00, y=35.00, frame=physics)
    >>> container.from_physics(FramedPoint.physics(100.0, 35.0), CoordinateFrame.SCREEN)
    FramedPoint(x=100.00, y=365.00, frame=screen)
"""

from pydantic import BaseModel, ConfigDict, Field

from models import CoordinateFrame, FramedPoint, Point2D, Resolution


class FrameMismatchError(ValueError):
    """Raised when a point is not in the frame an operation requires."""

    def __init__(self, expected: CoordinateFrame, got: CoordinateFrame):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected a point in the {expected.value} frame, got {got.value}")


class ContainerFrame(BaseModel):
    """The rectangle balls fly across, used to convert between frames.

    Attributes:
        width: Container width in pixels
        height: Container height in pixels
    """
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @classmethod
    def from_resolution(cls, resolution: Resolution) -> 'ContainerFrame':
        """Build a container covering a whole display."""
        return cls(width=resolution.width, height=resolution.height)

    def to_physics(self, point: FramedPoint) -> FramedPoint:
        """Convert a host-frame point to the physics frame.

        Args:
            point: Point tagged with its frame

        Returns:
            The same position in the physics frame

        Raises:
            TypeError: If the point is an untagged Point2D
        """
        if not isinstance(point, FramedPoint):
            raise TypeError(f"Frame conversion needs a FramedPoint, got {type(point).__name__}")

        if point.frame == CoordinateFrame.PHYSICS:
            return point
        if point.frame == CoordinateFrame.SCREEN:
            x, y = point.x, self.height - point.y
        elif point.frame == CoordinateFrame.CSS_BOTTOM:
            x, y = point.x, point.y
        else:  # CSS_PERCENT
            x, y = point.x * self.width / 100.0, point.y * self.height / 100.0

        return FramedPoint(x=x, y=y, frame=CoordinateFrame.PHYSICS)

    def from_physics(self, point: FramedPoint, frame: CoordinateFrame) -> FramedPoint:
        """Convert a physics-frame point to a host frame.

        Args:
            point: Point in the physics frame
            frame: Frame to express it in

        Returns:
            The same position in ``frame``

        Raises:
            TypeError: If the point is an untagged Point2D
            FrameMismatchError: If ``point`` is not in the physics frame
        """
        if not isinstance(point, FramedPoint):
            raise TypeError(f"Frame conversion needs a FramedPoint, got {type(point).__name__}")
        if point.frame != CoordinateFrame.PHYSICS:
            raise FrameMismatchError(CoordinateFrame.PHYSICS, point.frame)

        if frame == CoordinateFrame.PHYSICS:
            return point
        if frame == CoordinateFrame.SCREEN:
            x, y = point.x, self.height - point.y
        elif frame == CoordinateFrame.CSS_BOTTOM:
            x, y = point.x, point.y
        else:  # CSS_PERCENT
            x, y = point.x * 100.0 / self.width, point.y * 100.0 / self.height

        return FramedPoint(x=x, y=y, frame=frame)

    def convert(self, point: FramedPoint, frame: CoordinateFrame) -> FramedPoint:
        """Convert a point between any two frames, going through physics."""
        return self.from_physics(self.to_physics(point), frame)

    def tag(self, point: Point2D, frame: CoordinateFrame) -> FramedPoint:
        """Attach a frame to a raw point coming from the host."""
        return FramedPoint(x=point.x, y=point.y, frame=frame)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"ContainerFrame({self.width:g}x{self.height:g})"

"""
Shared primitive data types for ball flight animation.

This module provides the geometric and color types used throughout the
codebase: trajectory requests, the coordinate-frame adapter, the animation
driver and the renderer all speak in these types.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict


class CoordinateFrame(str, Enum):
    """Coordinate frames a position can be expressed in.

    Attributes:
        PHYSICS: Origin at the container's bottom-left corner, y grows upward,
                 pixels. Gravity pulls toward smaller y.
        SCREEN: Origin at the top-left corner, y grows downward, pixels
                (pygame and CSS ``top`` convention).
        CSS_BOTTOM: ``left``/``bottom`` offsets in pixels.
        CSS_PERCENT: ``left``/``bottom`` offsets as percentages of the
                     container's width and height.
    """
    PHYSICS = "physics"
    SCREEN = "screen"
    CSS_BOTTOM = "css_bottom"
    CSS_PERCENT = "css_percent"


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities, and coordinates.

    Coordinates can be positive, negative, or zero but must be finite:
    NaN and infinity are rejected so a bad value never reaches a trajectory.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> vel = Point2D(x=-50.0, y=25.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class FramedPoint(Point2D):
    """A point tagged with the coordinate frame it is expressed in.

    Carrying the frame with every value means two points can only be mixed
    in one expression after an explicit conversion through
    ``toss.frames.ContainerFrame``.

    Examples:
        >>> FramedPoint(x=100.0, y=365.0, frame=CoordinateFrame.SCREEN)
        >>> FramedPoint.physics(100.0, 35.0)
    """
    frame: CoordinateFrame

    @classmethod
    def physics(cls, x: float, y: float) -> 'FramedPoint':
        """Build a point in the physics frame."""
        return cls(x=x, y=y, frame=CoordinateFrame.PHYSICS)

    @classmethod
    def screen(cls, x: float, y: float) -> 'FramedPoint':
        """Build a point in the top-down screen frame."""
        return cls(x=x, y=y, frame=CoordinateFrame.SCREEN)

    @property
    def as_tuple(self) -> Tuple[float, float]:
        """Return (x, y) without the frame tag."""
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"FramedPoint(x={self.x:.2f}, y={self.y:.2f}, frame={self.frame.value})"


class Resolution(BaseModel):
    """Display or container resolution.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> Resolution.parse("1280x720")
        Resolution(width=1280, height=720)
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse a ``WIDTHxHEIGHT`` string such as ``1280x720``.

        Raises:
            ValueError: If the text is not two integers separated by 'x'
        """
        try:
            width, height = text.lower().split('x')
            return cls(width=int(width), height=int(height))
        except ValueError as e:
            raise ValueError(f"Invalid resolution '{text}', expected WIDTHxHEIGHT") from e

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque
    """
    r: int
    g: int
    b: int
    a: int = 255

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple for pygame drawing."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_hex(cls, text: str) -> 'Color':
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``.

        Raises:
            ValueError: If the text is not a 6 or 8 digit hex color
        """
        digits = text.lstrip('#')
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color '{text}'")
        values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(r=values[0], g=values[1], b=values[2], a=values[3] if len(values) == 4 else 255)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"

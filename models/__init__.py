"""
Unified models library for the ball flight project.

This package provides the Pydantic data models used across the system:
- Primitives: Point2D, FramedPoint, CoordinateFrame, Resolution, Color

Usage:
    >>> from models import FramedPoint, CoordinateFrame
    >>> start = FramedPoint(x=100.0, y=365.0, frame=CoordinateFrame.SCREEN)
"""

from .primitives import (
    CoordinateFrame,
    Point2D,
    FramedPoint,
    Resolution,
    Color,
)

__all__ = [
    'CoordinateFrame',
    'Point2D',
    'FramedPoint',
    'Resolution',
    'Color',
]

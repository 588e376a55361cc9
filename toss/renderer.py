"""
Pygame rendering for balls in flight.

BallSprite.place() is the one write per frame the animation loop performs;
draw() is called afterwards by the render pass.
"""

from typing import List, Optional, Tuple

import numpy as np
import pygame

from models import Color, CoordinateFrame, FramedPoint
from toss.frames import ContainerFrame, FrameMismatchError
from toss.trajectory.base import Trajectory


class BallSprite:
    """A filled circle positioned in screen coordinates.

    Attributes:
        radius: Radius in pixels
        color: Fill color
        position: Last placed position, None until the first place()
    """

    OUTLINE_COLOR = (0, 0, 0)

    def __init__(self, radius: int, color: Color):
        self.radius = radius
        self.color = color
        self.position: Optional[FramedPoint] = None

    def place(self, point: FramedPoint) -> None:
        """Move the sprite to ``point``.

        Raises:
            FrameMismatchError: If the point is not in the screen frame
        """
        if point.frame != CoordinateFrame.SCREEN:
            raise FrameMismatchError(CoordinateFrame.SCREEN, point.frame)
        self.position = point

    def draw(self, surface: pygame.Surface) -> None:
        """Render the ball, if it has been placed."""
        if self.position is None or self.radius < 1:
            return

        center = (int(round(self.position.x)), int(round(self.position.y)))
        pygame.draw.circle(surface, self.color.as_rgb_tuple, center, self.radius)

        # Outline for visibility against light backgrounds
        if self.radius >= 2:
            pygame.draw.circle(surface, self.OUTLINE_COLOR, center, self.radius, 2)


def sample_path(trajectory: Trajectory, container: ContainerFrame, count: int = 32) -> np.ndarray:
    """Sample a trajectory at evenly spaced times, in screen coordinates.

    Args:
        trajectory: Trajectory to sample
        container: Container for the screen conversion
        count: Number of samples including both endpoints (>= 2)

    Returns:
        Array of shape (count, 2) with screen x, y
    """
    if count < 2:
        raise ValueError(f"Need at least 2 samples, got {count}")

    times = np.linspace(0.0, trajectory.duration, count)
    points = [
        container.from_physics(trajectory.get_position(float(t)), CoordinateFrame.SCREEN).as_tuple
        for t in times
    ]
    return np.array(points, dtype=float)


def draw_path(
    surface: pygame.Surface,
    trajectory: Trajectory,
    container: ContainerFrame,
    color: Tuple[int, int, int] = (148, 163, 184),
    count: int = 32,
) -> None:
    """Draw the full flight path as a polyline."""
    path = sample_path(trajectory, container, count)
    points: List[Tuple[int, int]] = [(int(round(x)), int(round(y))) for x, y in path]
    pygame.draw.lines(surface, color, False, points, 1)

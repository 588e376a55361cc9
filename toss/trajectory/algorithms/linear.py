"""
Linear trajectory algorithm for straight-line movement.

The ball slides from start to end at constant velocity. Useful for rolling
or sliding moves and as a reference path when tuning ballistic flights.

Examples:
    >>> from toss.frames import ContainerFrame
    >>> config = {
    ...     'duration': 0.5,
    ...     'start_x': 0.0,
    ...     'start_y': 300.0,
    ...     'end_x': 800.0,
    ...     'end_y': 300.0,
    ... }
    >>> trajectory = LinearTrajectory.generate(config, ContainerFrame(width=800, height=600))
    >>> trajectory.get_position(0.25)  # Midpoint
"""

from typing import Any, Dict

from models import FramedPoint
from toss.frames import ContainerFrame
from toss.trajectory.base import FlightRequest, Trajectory, endpoints_from_config
from toss.trajectory.algorithms.ballistic import lateral_deviation


class LinearTrajectoryImpl(Trajectory):
    """Linear trajectory implementation using straight-line interpolation.

    Position at elapsed time t is:
        P(t) = P0 + p * (P1 - P0),  p = t / T

    plus the same sideways deviation the ballistic flight uses, which is
    zero at both ends.
    """

    def get_position(self, elapsed: float) -> FramedPoint:
        """Get position at elapsed time using linear interpolation.

        Args:
            elapsed: Seconds since launch, clamped to [0, duration]

        Returns:
            Position in the physics frame
        """
        t = self.clamp(elapsed)
        p = t / self.duration
        start, end = self.request.start, self.request.end

        x = start.x + p * (end.x - start.x)
        x += lateral_deviation(t, self.duration, self.request.curve_magnitude)
        y = start.y + p * (end.y - start.y)
        return FramedPoint.physics(x, y)


class LinearTrajectory:
    """Linear trajectory algorithm generator."""

    @staticmethod
    def generate(config: Dict[str, Any], container: ContainerFrame) -> Trajectory:
        """Generate a linear trajectory from configuration.

        Required config keys:
            - start_x, start_y, end_x, end_y: float - Endpoints in the host frame
            - duration: float - Time to traverse the path in seconds

        Optional config keys:
            - frame: str - Host frame of the endpoints (default 'screen')
            - curve_magnitude: float - Sideways drift (default 0.0)

        Raises:
            KeyError: If required config keys are missing
            ValueError: If config values are invalid
        """
        start, end = endpoints_from_config(config, container)

        try:
            duration = config['duration']
        except KeyError as e:
            raise KeyError(f"Missing required config key: {e}")

        request = FlightRequest(
            start=start,
            end=end,
            duration=duration,
            curve_magnitude=config.get('curve_magnitude', 0.0),
        )
        return LinearTrajectoryImpl(request)


# Auto-register this algorithm when module is imported
from toss.trajectory.registry import TrajectoryRegistry
TrajectoryRegistry.register("linear", LinearTrajectory)

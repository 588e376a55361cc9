"""
Ballistic trajectory: projectile motion that lands exactly on its end point.

The launch velocity is solved from the end point instead of being derived
from a chosen peak height. With y measured upward in the physics frame:

    x(t) = x0 + vx * t + deviation(t)
    y(t) = y0 + vy0 * t - 0.5 * g * t²

    vx  = (x1 - x0) / T
    vy0 = (y1 - y0 + 0.5 * g * T²) / T

so x(T) = x1 and y(T) = y1 for any gravity and duration. The optional
sideways deviation sin(pi * p) * c * (1 - p), p = t / T, is zero at both ends
and never moves the landing point.

Examples:
    >>> from models import FramedPoint
    >>> start = FramedPoint.physics(100.0, 35.0)
    >>> end = FramedPoint.physics(300.0, 30.0)
    >>> state = prepare(start, end, duration=0.9, gravity=500.0, min_ascent_velocity=0.0)
    >>> evaluate(state, start, 0.9)  # lands on end
"""

import math
from typing import Any, Dict

from models import CoordinateFrame, FramedPoint
from toss import config as toss_config
from toss.frames import ContainerFrame, FrameMismatchError
from toss.logging import get_logger
from toss.trajectory.base import (
    AscentFloorError,
    AscentPolicy,
    Trajectory,
    TrajectoryRequest,
    TrajectoryState,
    endpoints_from_config,
)

log = get_logger('trajectory')

VELOCITY_EPSILON = 1e-9


def required_ascent_velocity(rise: float, duration: float, gravity: float) -> float:
    """Initial vertical velocity that covers ``rise`` in exactly ``duration``.

    Args:
        rise: end.y - start.y in the physics frame
        duration: Flight time in seconds
        gravity: Downward acceleration

    Returns:
        vy0 in pixels/second (positive = upward)
    """
    return (rise + 0.5 * gravity * duration * duration) / duration


def minimum_flight_duration(rise: float, gravity: float, min_ascent_velocity: float) -> float:
    """Shortest duration whose required ascent velocity reaches the floor.

    Solves 0.5 * g * T² - v_min * T + rise = 0 for its larger root. Below
    that root the required velocity is under the floor.
    """
    discriminant = min_ascent_velocity * min_ascent_velocity - 2.0 * gravity * rise
    return (min_ascent_velocity + math.sqrt(max(discriminant, 0.0))) / gravity


def lateral_deviation(elapsed: float, duration: float, curve_magnitude: float) -> float:
    """Sideways offset added to x for a visibly curved path.

    Zero at elapsed = 0 and elapsed = duration for any magnitude.
    """
    if curve_magnitude == 0.0:
        return 0.0
    progress = elapsed / duration
    return math.sin(math.pi * progress) * curve_magnitude * (1.0 - progress)


def prepare_request(request: TrajectoryRequest) -> TrajectoryState:
    """Derive the constant flight state for a validated request.

    Args:
        request: Validated flight request (physics frame)

    Returns:
        TrajectoryState for the whole flight

    Raises:
        AscentFloorError: Under AscentPolicy.STRICT when the required launch
                          velocity is below the floor
    """
    duration = request.duration
    gravity = request.gravity
    rise = request.end.y - request.start.y
    floor = request.min_ascent_velocity

    vy0 = required_ascent_velocity(rise, duration, gravity)
    lands_exactly = True

    # Rounding slack so a duration from minimum_flight_duration() is accepted
    if vy0 < floor - VELOCITY_EPSILON * max(1.0, floor):
        minimum = minimum_flight_duration(rise, gravity, floor)

        if request.policy == AscentPolicy.STRICT:
            raise AscentFloorError(vy0, floor, minimum)

        if request.policy == AscentPolicy.STRETCH:
            log.debug("Stretching flight from %.3fs to %.3fs to reach ascent floor %.1f",
                      duration, minimum, floor)
            duration = minimum
            vy0 = required_ascent_velocity(rise, duration, gravity)
        else:
            log.info("Launching at ascent floor %.1f instead of %.1f; landing y is a target",
                     floor, vy0)
            vy0 = floor
            lands_exactly = False

    vx = (request.end.x - request.start.x) / duration

    return TrajectoryState(
        vx=vx,
        vy0=vy0,
        duration=duration,
        gravity=gravity,
        curve_magnitude=request.curve_magnitude,
        lands_exactly=lands_exactly,
    )


def prepare(
    start: FramedPoint,
    end: FramedPoint,
    duration: float,
    gravity: float,
    min_ascent_velocity: float,
    policy: AscentPolicy = AscentPolicy.STRICT,
    curve_magnitude: float = 0.0,
) -> TrajectoryState:
    """Validate a flight and derive its constant state.

    Args:
        start: Launch position (physics frame)
        end: Landing position (physics frame)
        duration: Flight time in seconds, > 0
        gravity: Downward acceleration in pixels/second², > 0
        min_ascent_velocity: Lowest acceptable launch velocity, >= 0
        policy: What to do if the required velocity is below the floor
        curve_magnitude: Sideways drift scale in pixels

    Returns:
        TrajectoryState with vx, vy0 and the effective duration

    Raises:
        pydantic.ValidationError: Non-positive duration or gravity, negative
                                  floor, non-finite values, or endpoints
                                  outside the physics frame
        AscentFloorError: STRICT policy and required velocity below the floor
    """
    request = TrajectoryRequest(
        start=start,
        end=end,
        duration=duration,
        gravity=gravity,
        min_ascent_velocity=min_ascent_velocity,
        curve_magnitude=curve_magnitude,
        policy=policy,
    )
    return prepare_request(request)


def evaluate(state: TrajectoryState, start: FramedPoint, elapsed: float) -> FramedPoint:
    """Position of the ball ``elapsed`` seconds after launch.

    Elapsed times outside [0, duration] are clamped, so the ball neither
    renders before launch nor flies past its landing point.

    Args:
        state: Flight state from prepare()
        start: Launch position (physics frame)
        elapsed: Seconds since launch

    Returns:
        Position in the physics frame

    Raises:
        TypeError: If ``start`` is an untagged Point2D
        FrameMismatchError: If ``start`` is not in the physics frame
    """
    if not isinstance(start, FramedPoint):
        raise TypeError(f"Launch position needs a FramedPoint, got {type(start).__name__}")
    if start.frame != CoordinateFrame.PHYSICS:
        raise FrameMismatchError(CoordinateFrame.PHYSICS, start.frame)

    t = min(max(elapsed, 0.0), state.duration)

    x = start.x + state.vx * t + lateral_deviation(t, state.duration, state.curve_magnitude)
    y = start.y + state.vy0 * t - 0.5 * state.gravity * t * t
    return FramedPoint.physics(x, y)


def landing_point(state: TrajectoryState, start: FramedPoint) -> FramedPoint:
    """Where the flight actually ends.

    Equal to the requested end point unless the TARGET policy applied.
    """
    return evaluate(state, start, state.duration)


def peak_point(state: TrajectoryState, start: FramedPoint) -> FramedPoint:
    """Highest position reached during the flight."""
    return evaluate(state, start, state.apex_time)


class BallisticTrajectoryImpl(Trajectory):
    """Trajectory following a gravity arc between two points.

    The flight state is computed once at construction; get_position() is a
    pure function of elapsed time.

    Attributes:
        request: Immutable flight request
        state: Derived flight state
    """

    def __init__(self, request: TrajectoryRequest):
        super().__init__(request)
        self.state = prepare_request(request)

    @property
    def duration(self) -> float:
        """Effective flight time, including any STRETCH adjustment."""
        return self.state.duration

    @property
    def lands_exactly(self) -> bool:
        """Whether the flight is guaranteed to end on the requested point."""
        return self.state.lands_exactly

    def get_position(self, elapsed: float) -> FramedPoint:
        """Get position at elapsed time.

        Args:
            elapsed: Seconds since launch, clamped to [0, duration]

        Returns:
            Position in the physics frame
        """
        return evaluate(self.state, self.request.start, elapsed)

    def landing(self) -> FramedPoint:
        """Where this flight ends."""
        return landing_point(self.state, self.request.start)

    def peak(self) -> FramedPoint:
        """Highest point of this flight."""
        return peak_point(self.state, self.request.start)


class BallisticTrajectory:
    """Ballistic trajectory algorithm generator.

    Factory class that implements the TrajectoryAlgorithm protocol.
    """

    @staticmethod
    def generate(config: Dict[str, Any], container: ContainerFrame) -> Trajectory:
        """Generate a ballistic trajectory from configuration.

        Required config keys:
            - start_x, start_y, end_x, end_y: float - Endpoints in the host frame
            - duration: float - Flight time in seconds

        Optional config keys:
            - frame: str - Host frame of the endpoints (default 'screen')
            - gravity: float - pixels/second² (default from toss.config)
            - min_ascent_velocity: float - (default from toss.config)
            - curve_magnitude: float - (default from toss.config)
            - policy: str - 'strict', 'stretch' or 'target' (default from toss.config)

        Args:
            config: Configuration dictionary with trajectory parameters
            container: Container used to convert the endpoints

        Returns:
            BallisticTrajectoryImpl instance

        Raises:
            KeyError: If required config keys are missing
            ValueError: If config values are invalid
            AscentFloorError: STRICT policy and launch velocity below the floor
        """
        start, end = endpoints_from_config(config, container)

        try:
            duration = config['duration']
        except KeyError as e:
            raise KeyError(f"Missing required config key: {e}")

        request = TrajectoryRequest(
            start=start,
            end=end,
            duration=duration,
            gravity=config.get('gravity', toss_config.GRAVITY),
            min_ascent_velocity=config.get('min_ascent_velocity', toss_config.MIN_ASCENT_VELOCITY),
            curve_magnitude=config.get('curve_magnitude', toss_config.CURVE_MAGNITUDE),
            policy=AscentPolicy(config.get('policy', toss_config.ASCENT_POLICY)),
        )
        return BallisticTrajectoryImpl(request)


# Auto-register this algorithm when module is imported
from toss.trajectory.registry import TrajectoryRegistry
TrajectoryRegistry.register("ballistic", BallisticTrajectory)

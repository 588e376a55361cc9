"""
Base classes and protocols for trajectory algorithms.

This module defines the core interfaces and data structures for ball
flights. A flight is described by an immutable FlightRequest in the
physics frame; algorithms derive whatever constant state they need from it
once and then answer position queries for any elapsed time.

Examples:
    >>> from toss.trajectory.base import TrajectoryRequest
    >>> from models import FramedPoint
    >>> request = TrajectoryRequest(
    ...     start=FramedPoint.physics(100.0, 35.0),
    ...     end=FramedPoint.physics(300.0, 30.0),
    ...     duration=0.9,
    ...     gravity=500.0,
    ... )
"""

from enum import Enum
from typing import Any, Dict, Protocol, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from models import CoordinateFrame, FramedPoint
from toss.frames import ContainerFrame


class AscentPolicy(str, Enum):
    """What to do when the launch speed needed to land on the end point is
    below the minimum ascent velocity.

    Attributes:
        STRICT: Reject the request; the error reports the shortest duration
                that satisfies the floor so the caller can retry with it.
        STRETCH: Lengthen the flight to that shortest duration. The ball
                 still lands exactly on the end point.
        TARGET: Launch at the floor velocity and keep the horizontal rate.
                The end point's y becomes a target, not a guarantee.
    """
    STRICT = "strict"
    STRETCH = "stretch"
    TARGET = "target"


class AscentFloorError(ValueError):
    """Raised under AscentPolicy.STRICT when the required launch velocity is
    below the minimum ascent velocity.

    Attributes:
        required_velocity: Launch velocity that lands exactly on the end point
        min_ascent_velocity: Configured floor
        minimum_duration: Shortest flight duration whose required velocity
                          reaches the floor
    """

    def __init__(self, required_velocity: float, min_ascent_velocity: float, minimum_duration: float):
        self.required_velocity = required_velocity
        self.min_ascent_velocity = min_ascent_velocity
        self.minimum_duration = minimum_duration
        super().__init__(
            f"Required ascent velocity {required_velocity:.3f} is below the minimum "
            f"{min_ascent_velocity:.3f}; use a duration of at least {minimum_duration:.3f}s"
        )


class FlightRequest(BaseModel):
    """Immutable description of one flight between two physics-frame points.

    Created when an animation starts and discarded when it ends. Both
    endpoints must already be in the physics frame; host coordinates go
    through ContainerFrame.to_physics first. Paths without gravity, such as
    the linear slide, need nothing more.

    Attributes:
        start: Launch position (physics frame)
        end: Landing position (physics frame)
        duration: Flight time in seconds (positive)
        curve_magnitude: Peak-scale sideways drift in pixels (0 = none)
    """
    start: FramedPoint
    end: FramedPoint
    duration: float
    curve_magnitude: float = 0.0

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator('start', 'end')
    @classmethod
    def validate_physics_frame(cls, v: FramedPoint) -> FramedPoint:
        """Validate endpoints are expressed in the physics frame.

        Raises:
            ValueError: If the point carries any other frame
        """
        if v.frame != CoordinateFrame.PHYSICS:
            raise ValueError(
                f'Trajectory endpoints must be in the physics frame, got {v.frame.value}'
            )
        return v

    @field_validator('duration')
    @classmethod
    def validate_positive_duration(cls, v: float) -> float:
        """Validate duration is positive.

        Raises:
            ValueError: If duration is not positive
        """
        if v <= 0:
            raise ValueError(f'Duration must be positive, got {v}')
        return v

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"{type(self).__name__}(start={self.start}, end={self.end}, "
                f"duration={self.duration:.3f}s)")


class TrajectoryRequest(FlightRequest):
    """Flight request for a ballistic arc.

    Adds gravity and the ascent floor to the shared endpoint and duration
    fields.

    Attributes:
        gravity: Downward acceleration in pixels/second² (positive)
        min_ascent_velocity: Lowest acceptable launch velocity (non-negative)
        policy: How to handle a launch velocity below the floor

    Examples:
        >>> TrajectoryRequest(
        ...     start=FramedPoint.physics(0.0, 0.0),
        ...     end=FramedPoint.physics(200.0, 0.0),
        ...     duration=1.0,
        ...     gravity=500.0,
        ...     min_ascent_velocity=100.0,
        ...     policy=AscentPolicy.STRETCH,
        ... )
    """
    gravity: float
    min_ascent_velocity: float = 0.0
    policy: AscentPolicy = AscentPolicy.STRICT

    @field_validator('gravity')
    @classmethod
    def validate_positive_gravity(cls, v: float) -> float:
        """Validate gravity is positive.

        Raises:
            ValueError: If gravity is not positive
        """
        if v <= 0:
            raise ValueError(f'Gravity must be positive, got {v}')
        return v

    @field_validator('min_ascent_velocity')
    @classmethod
    def validate_non_negative_floor(cls, v: float) -> float:
        """Validate the ascent floor is not negative.

        Raises:
            ValueError: If the floor is negative
        """
        if v < 0:
            raise ValueError(f'Minimum ascent velocity must not be negative, got {v}')
        return v

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"TrajectoryRequest(start={self.start}, end={self.end}, "
                f"duration={self.duration:.3f}s, gravity={self.gravity:.1f})")


class TrajectoryState(BaseModel):
    """Constant flight parameters derived once from a TrajectoryRequest.

    Attributes:
        vx: Horizontal velocity in pixels/second
        vy0: Initial vertical velocity in pixels/second (positive = upward)
        duration: Effective flight time (longer than requested after STRETCH)
        gravity: Downward acceleration in pixels/second²
        curve_magnitude: Sideways drift scale in pixels
        lands_exactly: False only when the TARGET policy raised vy0 to the floor
    """
    vx: float
    vy0: float
    duration: float
    gravity: float
    curve_magnitude: float = 0.0
    lands_exactly: bool = True

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @property
    def apex_time(self) -> float:
        """Elapsed time at which vertical velocity reaches zero.

        May fall outside [0, duration] when the flight never turns over.
        """
        return self.vy0 / self.gravity

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"TrajectoryState(vx={self.vx:.2f}, vy0={self.vy0:.2f}, "
                f"duration={self.duration:.3f}s, exact={self.lands_exactly})")


class Trajectory:
    """Represents a flight path a ball follows.

    Positions are queried by elapsed time in seconds. Elapsed times outside
    [0, duration] are clamped to the nearest end of the flight.

    This is an abstract base class that should be subclassed by specific
    trajectory algorithm implementations.

    Attributes:
        request: Immutable flight request
    """

    def __init__(self, request: FlightRequest):
        """Initialize trajectory with its request.

        Args:
            request: Immutable flight request
        """
        self.request = request

    @property
    def start(self) -> FramedPoint:
        """Launch position in the physics frame."""
        return self.request.start

    @property
    def end(self) -> FramedPoint:
        """Requested landing position in the physics frame."""
        return self.request.end

    @property
    def duration(self) -> float:
        """Effective flight time in seconds."""
        return self.request.duration

    def clamp(self, elapsed: float) -> float:
        """Clamp elapsed time to [0, duration]."""
        return min(max(elapsed, 0.0), self.duration)

    def progress(self, elapsed: float) -> float:
        """Get fraction of the flight completed (0.0 to 1.0)."""
        return self.clamp(elapsed) / self.duration

    def get_position(self, elapsed: float) -> FramedPoint:
        """Get position at elapsed time.

        Must be implemented by subclasses.

        Args:
            elapsed: Seconds since launch (clamped to [0, duration])

        Returns:
            Position in the physics frame

        Raises:
            NotImplementedError: If called on base class
        """
        raise NotImplementedError("Subclasses must implement get_position()")


class TrajectoryAlgorithm(Protocol):
    """Protocol defining the interface for trajectory generation algorithms.

    Algorithms are stateless: generate() builds a Trajectory from a config
    dictionary whose coordinates are in the host frame.
    """

    @staticmethod
    def generate(config: Dict[str, Any], container: ContainerFrame) -> Trajectory:
        """Generate a trajectory from configuration parameters.

        Args:
            config: Algorithm parameters. Common keys:
                    - 'start_x', 'start_y', 'end_x', 'end_y': endpoints
                    - 'duration': flight time in seconds
                    - 'frame': host frame of the endpoints (default 'screen')
            container: Container used to convert endpoints to the physics frame

        Returns:
            Configured Trajectory instance ready for use

        Raises:
            KeyError: If required config keys are missing
            ValueError: If configuration values are invalid
        """
        ...


def endpoints_from_config(config: Dict[str, Any], container: ContainerFrame) -> Tuple[FramedPoint, FramedPoint]:
    """Read start/end from a config dict and convert them to the physics frame.

    Args:
        config: Dict with 'start_x', 'start_y', 'end_x', 'end_y' and an
                optional 'frame' naming the host frame (default 'screen')
        container: Container used for the conversion

    Returns:
        (start, end) in the physics frame

    Raises:
        KeyError: If a coordinate key is missing
    """
    try:
        host = CoordinateFrame(config.get('frame', CoordinateFrame.SCREEN))
        start = FramedPoint(x=config['start_x'], y=config['start_y'], frame=host)
        end = FramedPoint(x=config['end_x'], y=config['end_y'], frame=host)
    except KeyError as e:
        raise KeyError(f"Missing required config key: {e}")

    return container.to_physics(start), container.to_physics(end)

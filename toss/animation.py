"""
Frame-driven flight animation.

A FlightAnimation samples one trajectory once per frame, converts the sample
back to the host frame and hands it to a ``place`` callable, the only side
effect of a frame. When the flight's duration has elapsed it calls
``on_complete`` exactly once. AnimationLoop ticks many independent flights
from one clock.

Examples:
    >>> loop = AnimationLoop(container=ContainerFrame(width=800, height=400))
    >>> flight = loop.launch(trajectory, sprite.place, on_complete=lambda: print("landed"))
    >>> while loop.active_count:
    ...     loop.tick()
"""

import time
import uuid
from enum import Enum
from typing import Callable, List, Optional

from models import CoordinateFrame, FramedPoint
from toss.frames import ContainerFrame
from toss.logging import get_logger, record_flight
from toss.trajectory.base import Trajectory

log = get_logger('animation')

PlaceCallback = Callable[[FramedPoint], None]
CompleteCallback = Callable[[], None]


class FlightState(str, Enum):
    """Lifecycle of a flight animation.

    Attributes:
        PENDING: Created, not started
        RUNNING: Being ticked
        COMPLETE: Reached its duration; completion was reported
        CANCELLED: Stopped before completing; completion is never reported
    """
    PENDING = "pending"
    RUNNING = "running"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class FlightAnimation:
    """Drives one ball along one trajectory.

    Attributes:
        trajectory: The Trajectory being followed
        flight_id: Short identifier used in log records
        output_frame: Frame samples are converted to before ``place``
    """

    def __init__(
        self,
        trajectory: Trajectory,
        place: PlaceCallback,
        on_complete: Optional[CompleteCallback] = None,
        container: Optional[ContainerFrame] = None,
        output_frame: CoordinateFrame = CoordinateFrame.SCREEN,
        flight_id: Optional[str] = None,
    ):
        """Initialize a flight animation.

        Args:
            trajectory: Trajectory to follow (physics frame)
            place: Called once per tick with the position in ``output_frame``
            on_complete: Called with no arguments when the flight lands
            container: Needed for any output frame other than PHYSICS
            output_frame: Frame the host expects positions in
            flight_id: Identifier for log records (random if omitted)

        Raises:
            ValueError: If a host output frame is requested without a container
        """
        if container is None and output_frame != CoordinateFrame.PHYSICS:
            raise ValueError(f"A container is required to output {output_frame.value} positions")

        self.trajectory = trajectory
        self.output_frame = output_frame
        self.flight_id = flight_id or uuid.uuid4().hex[:8]
        self._place = place
        self._on_complete = on_complete
        self._container = container
        self._state = FlightState.PENDING
        self._start_time = 0.0
        self._elapsed = 0.0

    @property
    def state(self) -> FlightState:
        """Get the current lifecycle state."""
        return self._state

    @property
    def is_running(self) -> bool:
        """Check if the flight is still being animated."""
        return self._state == FlightState.RUNNING

    @property
    def is_complete(self) -> bool:
        """Check if the flight reached its landing point."""
        return self._state == FlightState.COMPLETE

    @property
    def elapsed(self) -> float:
        """Elapsed time at the last tick, clamped to the flight duration."""
        return self._elapsed

    @property
    def progress(self) -> float:
        """Fraction of the flight completed at the last tick (0.0 to 1.0)."""
        return self.trajectory.progress(self._elapsed)

    def start(self, now: float) -> None:
        """Start the flight at clock time ``now``.

        Starting an already started flight does nothing.
        """
        if self._state != FlightState.PENDING:
            return

        self._start_time = now
        self._state = FlightState.RUNNING
        log.debug("Flight %s launched, duration %.3fs", self.flight_id, self.trajectory.duration)
        record_flight(
            'launch', self.flight_id,
            duration=self.trajectory.duration,
            start=list(self.trajectory.start.as_tuple),
            end=list(self.trajectory.end.as_tuple),
        )

    def tick(self, now: float) -> Optional[FramedPoint]:
        """Advance the flight to clock time ``now``.

        A pending flight starts on its first tick. Finished or cancelled
        flights ignore ticks.

        Args:
            now: Current clock time in seconds

        Returns:
            The position handed to ``place``, or None if the flight is over
        """
        if self._state == FlightState.PENDING:
            self.start(now)
        if self._state != FlightState.RUNNING:
            return None

        raw_elapsed = now - self._start_time
        self._elapsed = self.trajectory.clamp(raw_elapsed)

        position = self.trajectory.get_position(self._elapsed)
        if self.output_frame != CoordinateFrame.PHYSICS:
            position = self._container.from_physics(position, self.output_frame)
        self._place(position)

        if raw_elapsed >= self.trajectory.duration:
            self._finish(position)

        return position

    def cancel(self) -> None:
        """Stop the flight without reporting completion."""
        if self._state in (FlightState.COMPLETE, FlightState.CANCELLED):
            return

        self._state = FlightState.CANCELLED
        log.debug("Flight %s cancelled at %.3fs", self.flight_id, self._elapsed)
        record_flight('cancel', self.flight_id, elapsed=self._elapsed)

    def _finish(self, position: FramedPoint) -> None:
        """Mark the flight complete and report it once."""
        self._state = FlightState.COMPLETE
        log.debug("Flight %s landed at %s", self.flight_id, position)
        record_flight(
            'complete', self.flight_id,
            landing=list(position.as_tuple),
            frame=position.frame.value,
        )
        if self._on_complete is not None:
            self._on_complete()

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"FlightAnimation(id={self.flight_id}, state={self._state.value}, "
                f"progress={self.progress:.2f})")


class AnimationLoop:
    """Ticks any number of independent flights from one clock.

    Each flight owns its own trajectory; nothing is shared between them.
    Call tick() once per display frame.

    Attributes:
        container: Container used to convert samples for every flight
        output_frame: Frame positions are delivered in
    """

    def __init__(
        self,
        container: ContainerFrame,
        output_frame: CoordinateFrame = CoordinateFrame.SCREEN,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.container = container
        self.output_frame = output_frame
        self._clock = clock
        self._flights: List[FlightAnimation] = []

    @property
    def flights(self) -> List[FlightAnimation]:
        """Flights still being animated."""
        return list(self._flights)

    @property
    def active_count(self) -> int:
        """Number of flights still being animated."""
        return len(self._flights)

    def launch(
        self,
        trajectory: Trajectory,
        place: PlaceCallback,
        on_complete: Optional[CompleteCallback] = None,
    ) -> FlightAnimation:
        """Create and start a flight now.

        Args:
            trajectory: Trajectory to follow
            place: Receives the position every frame
            on_complete: Called once when the flight lands

        Returns:
            The running FlightAnimation
        """
        flight = FlightAnimation(
            trajectory,
            place,
            on_complete=on_complete,
            container=self.container,
            output_frame=self.output_frame,
        )
        flight.start(self._clock())
        self._flights.append(flight)
        return flight

    def tick(self) -> int:
        """Advance every flight to the current clock time.

        Finished and cancelled flights are dropped after the tick.

        Returns:
            Number of flights still running
        """
        now = self._clock()
        for flight in list(self._flights):
            flight.tick(now)
        self._flights = [f for f in self._flights if f.is_running]
        return len(self._flights)

    def cancel_all(self) -> None:
        """Cancel every running flight."""
        for flight in self._flights:
            flight.cancel()
        self._flights.clear()

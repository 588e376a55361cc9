"""
Trajectory system for ball flights.

This package provides:

- The request/state types and the Trajectory base class
- A registry for selecting algorithms by name
- Built-in algorithms (ballistic, linear)
- The pure evaluator functions prepare() and evaluate()

Quick Start:
    >>> from models import FramedPoint
    >>> from toss.trajectory import prepare, evaluate
    >>> start = FramedPoint.physics(100.0, 35.0)
    >>> state = prepare(start, FramedPoint.physics(300.0, 30.0),
    ...                 duration=0.9, gravity=500.0, min_ascent_velocity=0.0)
    >>> evaluate(state, start, 0.45)
"""

from toss.trajectory.base import (
    AscentFloorError,
    AscentPolicy,
    FlightRequest,
    Trajectory,
    TrajectoryAlgorithm,
    TrajectoryRequest,
    TrajectoryState,
)
from toss.trajectory.registry import TrajectoryRegistry

# Import algorithms to auto-register them
from toss.trajectory.algorithms.ballistic import (
    evaluate,
    lateral_deviation,
    landing_point,
    peak_point,
    prepare,
)
import toss.trajectory.algorithms.linear

__all__ = [
    'AscentFloorError',
    'AscentPolicy',
    'FlightRequest',
    'Trajectory',
    'TrajectoryAlgorithm',
    'TrajectoryRequest',
    'TrajectoryState',
    'TrajectoryRegistry',
    'prepare',
    'evaluate',
    'lateral_deviation',
    'landing_point',
    'peak_point',
]

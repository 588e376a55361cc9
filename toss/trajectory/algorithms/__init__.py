"""
Built-in trajectory algorithms.

- ballistic: Gravity arc solved to land exactly on its end point
- linear: Straight-line movement at constant velocity

All algorithms in this package are registered with the TrajectoryRegistry
when imported.
"""

from toss.trajectory.algorithms.ballistic import BallisticTrajectory, BallisticTrajectoryImpl
from toss.trajectory.algorithms.linear import LinearTrajectory, LinearTrajectoryImpl

__all__ = [
    'BallisticTrajectory',
    'BallisticTrajectoryImpl',
    'LinearTrajectory',
    'LinearTrajectoryImpl',
]

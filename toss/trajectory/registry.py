"""
Registry system for trajectory algorithms.

Callers pick a flight style by name ("ballistic", "linear") without
importing the implementation.

Examples:
    >>> from toss.trajectory.registry import TrajectoryRegistry
    >>> TrajectoryRegistry.list_algorithms()
    ['ballistic', 'linear']
    >>> algorithm = TrajectoryRegistry.get("ballistic")
    >>> trajectory = algorithm.generate(config, container)
"""

from typing import Dict, List, Type

from toss.trajectory.base import TrajectoryAlgorithm


class TrajectoryRegistry:
    """Central registry of trajectory generation algorithms.

    Class Attributes:
        _algorithms: Dictionary mapping algorithm names to algorithm classes
    """

    _algorithms: Dict[str, Type[TrajectoryAlgorithm]] = {}

    @classmethod
    def register(cls, name: str, algorithm: Type[TrajectoryAlgorithm]) -> None:
        """Register a trajectory algorithm with a given name.

        An existing registration with the same name is replaced.

        Args:
            name: Unique identifier for the algorithm (e.g., "ballistic")
            algorithm: Algorithm class implementing TrajectoryAlgorithm protocol
        """
        cls._algorithms[name] = algorithm

    @classmethod
    def get(cls, name: str) -> Type[TrajectoryAlgorithm]:
        """Retrieve a trajectory algorithm by name.

        Args:
            name: Name of the algorithm to retrieve

        Returns:
            Algorithm class implementing TrajectoryAlgorithm protocol

        Raises:
            ValueError: If no algorithm with the given name is registered
        """
        if name not in cls._algorithms:
            available = ", ".join(cls.list_algorithms())
            raise ValueError(
                f"Unknown trajectory algorithm: '{name}'. "
                f"Available algorithms: {available if available else 'none'}"
            )
        return cls._algorithms[name]

    @classmethod
    def list_algorithms(cls) -> List[str]:
        """List all registered algorithm names, sorted."""
        return sorted(cls._algorithms.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if an algorithm is registered."""
        return name in cls._algorithms

    @classmethod
    def clear(cls) -> None:
        """Clear all registered algorithms.

        Primarily useful for testing to ensure clean state between tests.
        """
        cls._algorithms.clear()

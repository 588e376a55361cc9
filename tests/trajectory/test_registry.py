"""Tests for TrajectoryRegistry."""

import pytest

from toss.trajectory import TrajectoryRegistry
from toss.trajectory.algorithms import BallisticTrajectory, LinearTrajectory


class TestTrajectoryRegistry:
    """Registration and lookup of trajectory algorithms by name."""

    def test_builtin_algorithms_registered(self):
        """Test importing the package registers the built-in algorithms."""
        assert TrajectoryRegistry.list_algorithms() == ['ballistic', 'linear']
        assert TrajectoryRegistry.get("ballistic") is BallisticTrajectory
        assert TrajectoryRegistry.get("linear") is LinearTrajectory

    def test_is_registered(self):
        assert TrajectoryRegistry.is_registered("ballistic") is True
        assert TrajectoryRegistry.is_registered("bezier") is False

    def test_unknown_algorithm(self):
        """Test unknown names raise ValueError listing what is available."""
        with pytest.raises(ValueError) as exc_info:
            TrajectoryRegistry.get("bezier")
        assert "Unknown trajectory algorithm: 'bezier'" in str(exc_info.value)
        assert "ballistic, linear" in str(exc_info.value)

    def test_register_alias(self, registry_state):
        """Test the same algorithm can be registered under a second name."""
        registry_state.register("arc", BallisticTrajectory)
        assert registry_state.get("arc") is BallisticTrajectory
        assert "arc" in registry_state.list_algorithms()

    def test_clear(self, registry_state):
        """Test clear() empties the registry and lookups then fail."""
        registry_state.clear()
        assert registry_state.list_algorithms() == []
        with pytest.raises(ValueError) as exc_info:
            registry_state.get("ballistic")
        assert "none" in str(exc_info.value)

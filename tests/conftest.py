"""Shared pytest fixtures."""
import copy
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pytest

from models import FramedPoint
from toss import logging as toss_logging
from toss.frames import ContainerFrame
from toss.trajectory import TrajectoryRegistry


@pytest.fixture
def container():
    """The 800x400 container used by the reference scenario."""
    return ContainerFrame(width=800, height=400)


@pytest.fixture
def scenario_points(container):
    """Reference scenario endpoints: screen (100, 365) -> (300, 370)."""
    start = container.to_physics(FramedPoint.screen(100.0, 365.0))
    end = container.to_physics(FramedPoint.screen(300.0, 370.0))
    return start, end


@pytest.fixture
def logging_state():
    """Snapshot the logging configuration and sinks, restore afterwards."""
    saved_config = copy.deepcopy(toss_logging._config)
    yield toss_logging._config
    toss_logging.close_all_sinks()
    toss_logging._config.clear()
    toss_logging._config.update(saved_config)


@pytest.fixture
def registry_state():
    """Snapshot the trajectory registry, restore afterwards."""
    saved = dict(TrajectoryRegistry._algorithms)
    yield TrajectoryRegistry
    TrajectoryRegistry._algorithms.clear()
    TrajectoryRegistry._algorithms.update(saved)


class FakeClock:
    """Manually advanced clock for driving animations in tests."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    """A FakeClock starting at t=100s."""
    return FakeClock(100.0)

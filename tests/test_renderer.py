"""Tests for the pygame ball renderer, drawn on off-screen surfaces."""
import numpy as np
import pygame
import pytest

from models import Color, FramedPoint
from toss.frames import FrameMismatchError
from toss.renderer import BallSprite, draw_path, sample_path
from toss.trajectory import TrajectoryRegistry


ORANGE = Color(r=249, g=115, b=22)


@pytest.fixture
def surface():
    surf = pygame.Surface((200, 200))
    surf.fill((0, 0, 0))
    return surf


@pytest.fixture
def trajectory(container):
    return TrajectoryRegistry.get("ballistic").generate({
        'start_x': 100.0, 'start_y': 365.0,
        'end_x': 300.0, 'end_y': 370.0,
        'duration': 0.9, 'gravity': 500.0,
        'min_ascent_velocity': 0.0, 'policy': 'strict',
    }, container)


class TestBallSprite:
    """Placement and drawing."""

    def test_place_screen_point(self):
        sprite = BallSprite(10, ORANGE)
        sprite.place(FramedPoint.screen(50.0, 60.0))
        assert sprite.position == FramedPoint.screen(50.0, 60.0)

    def test_place_rejects_physics_point(self):
        sprite = BallSprite(10, ORANGE)
        with pytest.raises(FrameMismatchError):
            sprite.place(FramedPoint.physics(50.0, 60.0))
        assert sprite.position is None

    def test_draw_fills_center(self, surface):
        sprite = BallSprite(10, ORANGE)
        sprite.place(FramedPoint.screen(50.0, 50.0))
        sprite.draw(surface)
        assert tuple(surface.get_at((50, 50)))[:3] == ORANGE.as_rgb_tuple

    def test_draw_before_place_is_noop(self, surface):
        BallSprite(10, ORANGE).draw(surface)
        assert pygame.surfarray.array3d(surface).sum() == 0


class TestPathSampling:
    """Sampled flight paths in screen coordinates."""

    def test_sample_endpoints(self, container, trajectory):
        path = sample_path(trajectory, container, count=10)
        assert path.shape == (10, 2)
        np.testing.assert_allclose(path[0], [100.0, 365.0], atol=1e-6)
        np.testing.assert_allclose(path[-1], [300.0, 370.0], atol=1e-6)

    def test_sample_rises_on_screen(self, container, trajectory):
        path = sample_path(trajectory, container, count=11)
        assert path[:, 1].min() < 365.0

    def test_needs_two_samples(self, container, trajectory):
        with pytest.raises(ValueError):
            sample_path(trajectory, container, count=1)

    def test_draw_path_marks_surface(self, container, trajectory):
        surf = pygame.Surface((400, 400))
        surf.fill((0, 0, 0))
        draw_path(surf, trajectory, container)
        assert pygame.surfarray.array3d(surf).sum() > 0

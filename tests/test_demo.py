"""Tests for the demo's argument handling and flight setup (no window needed)."""
import pytest

from models import FramedPoint, Resolution
from toss.frames import ContainerFrame

import toss_demo


@pytest.fixture
def demo_container():
    return ContainerFrame(width=1280, height=720)


class TestParseArgs:

    def test_defaults(self):
        args = toss_demo.parse_args([])
        assert args.preset == 'toss'
        assert args.algorithm == 'ballistic'
        assert args.duration is None
        assert isinstance(args.resolution, Resolution)

    def test_overrides(self):
        args = toss_demo.parse_args(['--preset', 'lob', '--policy', 'target',
                                     '--resolution', '800x600', '--curve', '20'])
        assert args.preset == 'lob'
        assert args.policy == 'target'
        assert args.resolution == Resolution(width=800, height=600)
        assert args.curve == 20.0

    def test_unknown_algorithm(self):
        with pytest.raises(SystemExit):
            toss_demo.parse_args(['--algorithm', 'bezier'])


class TestCreateTrajectory:

    def test_lands_on_click(self, demo_container):
        args = toss_demo.parse_args(['--policy', 'strict', '--duration', '0.9', '--gravity', '500'])
        click = FramedPoint.screen(900.0, 300.0)
        trajectory = toss_demo.create_trajectory(args, click, demo_container)

        landing = demo_container.from_physics(trajectory.get_position(trajectory.duration), click.frame)
        assert (landing.x, landing.y) == pytest.approx((900.0, 300.0), abs=1e-6)

    def test_strict_rejection_retries_with_longer_flight(self, demo_container):
        """Test a too-short strict toss is retried with the suggested duration."""
        args = toss_demo.parse_args(['--preset', 'toss', '--policy', 'strict',
                                     '--duration', '0.2', '--gravity', '500'])
        click = FramedPoint.screen(400.0, demo_container.height - toss_demo.LAUNCH_MARGIN)
        trajectory = toss_demo.create_trajectory(args, click, demo_container)

        assert trajectory.duration > 0.2
        landing = demo_container.from_physics(trajectory.get_position(trajectory.duration), click.frame)
        assert (landing.x, landing.y) == pytest.approx((click.x, click.y), abs=1e-6)

    def test_flight_config_uses_preset(self, demo_container):
        args = toss_demo.parse_args(['--preset', 'throw'])
        flight = toss_demo.build_flight_config(args, FramedPoint.screen(10.0, 20.0), demo_container)
        assert flight['duration'] == 0.5
        assert flight['gravity'] == 900.0
        assert flight['curve_magnitude'] == 25.0
        assert flight['frame'] == 'screen'


class TestPolicyDefault:

    def test_bad_env_policy_rejected_at_startup(self, monkeypatch):
        """Test an unknown TOSS_ASCENT_POLICY fails argument parsing, not the first toss."""
        monkeypatch.setattr(toss_demo.config, 'ASCENT_POLICY', 'bounce')
        with pytest.raises(SystemExit):
            toss_demo.parse_args([])

    def test_explicit_policy_overrides_bad_env(self, monkeypatch):
        monkeypatch.setattr(toss_demo.config, 'ASCENT_POLICY', 'bounce')
        assert toss_demo.parse_args(['--policy', 'strict']).policy == 'strict'

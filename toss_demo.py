#!/usr/bin/env python3
"""
Ball Toss Demo

Click anywhere in the window to toss a ball from the launch pad to that
point. Each ball lands exactly where you clicked, then disappears.

Usage:
    python toss_demo.py
    python toss_demo.py --preset lob
    python toss_demo.py --policy target --duration 0.3
    python toss_demo.py --algorithm linear --curve 40
    python toss_demo.py --resolution 1920x1080 --show-path

Keys:
    ESC     Quit
    C       Cancel all flights
"""

import argparse
import sys
from typing import Dict, List

import pygame

from models import Color, CoordinateFrame, FramedPoint, Resolution
from toss import config
from toss.animation import AnimationLoop
from toss.frames import ContainerFrame
from toss.logging import FLIGHT_STREAM, close_all_sinks, configure_logging, get_logger, register_sink, sink_from_environment
from toss.renderer import BallSprite, draw_path
from toss.trajectory import AscentFloorError, AscentPolicy, Trajectory, TrajectoryRegistry

log = get_logger('demo')

LAUNCH_MARGIN = 60


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Ball Toss Demo - click to toss a ball along a gravity arc',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--preset', default='toss', choices=sorted(config.PRESETS),
                        help='Flight preset (default: toss)')
    parser.add_argument('--algorithm', default='ballistic',
                        choices=TrajectoryRegistry.list_algorithms(),
                        help='Trajectory algorithm (default: ballistic)')
    parser.add_argument('--duration', type=float, default=None,
                        help='Flight time in seconds (overrides preset)')
    parser.add_argument('--gravity', type=float, default=None,
                        help='Gravity in pixels/second² (overrides preset)')
    parser.add_argument('--curve', type=float, default=None,
                        help='Sideways drift in pixels (overrides preset)')
    parser.add_argument('--policy', default=config.ASCENT_POLICY,
                        choices=[p.value for p in AscentPolicy],
                        help='Handling of launches below the ascent floor')
    parser.add_argument('--resolution', type=Resolution.parse,
                        default=Resolution(width=config.CONTAINER_WIDTH, height=config.CONTAINER_HEIGHT),
                        help='Window size as WIDTHxHEIGHT')
    parser.add_argument('--show-path', action='store_true', default=config.SHOW_PATH,
                        help='Draw the path of each flight')
    parser.add_argument('--log-level', default='INFO', help='Log level (DEBUG, INFO, ...)')
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.policy not in [p.value for p in AscentPolicy]:
        parser.error(f"invalid TOSS_ASCENT_POLICY: '{args.policy}'")
    return args


def build_flight_config(args: argparse.Namespace, target: FramedPoint, container: ContainerFrame) -> Dict:
    """Assemble the algorithm config for a toss from the launch pad to ``target``."""
    preset = config.get_preset(args.preset)
    return {
        'frame': CoordinateFrame.SCREEN.value,
        'start_x': float(LAUNCH_MARGIN),
        'start_y': container.height - LAUNCH_MARGIN,
        'end_x': target.x,
        'end_y': target.y,
        'duration': args.duration if args.duration is not None else preset.duration,
        'gravity': args.gravity if args.gravity is not None else preset.gravity,
        'min_ascent_velocity': preset.min_ascent_velocity,
        'curve_magnitude': args.curve if args.curve is not None else preset.curve_magnitude,
        'policy': args.policy,
    }


def create_trajectory(args: argparse.Namespace, target: FramedPoint, container: ContainerFrame) -> Trajectory:
    """Create a trajectory to ``target``, retrying once with a longer flight
    if the strict policy rejects the requested duration."""
    algorithm = TrajectoryRegistry.get(args.algorithm)
    flight_config = build_flight_config(args, target, container)
    try:
        return algorithm.generate(flight_config, container)
    except AscentFloorError as e:
        log.warning("%s", e)
        flight_config['duration'] = e.minimum_duration
        return algorithm.generate(flight_config, container)


def main(argv=None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    register_sink(FLIGHT_STREAM, sink_from_environment(FLIGHT_STREAM))

    container = ContainerFrame.from_resolution(args.resolution)
    ball_color = Color.from_hex(config.BALL_COLOR)
    background = Color.from_hex(config.BACKGROUND_COLOR).as_rgb_tuple

    pygame.init()
    screen = pygame.display.set_mode((args.resolution.width, args.resolution.height))
    pygame.display.set_caption("Ball Toss")
    clock = pygame.time.Clock()

    loop = AnimationLoop(container=container, output_frame=CoordinateFrame.SCREEN)
    sprites: List[BallSprite] = []
    paths: List[Trajectory] = []
    landed = 0

    def on_landed(sprite: BallSprite, trajectory: Trajectory) -> None:
        nonlocal landed
        landed += 1
        sprites.remove(sprite)
        if trajectory in paths:
            paths.remove(trajectory)
        log.info("Ball %d landed", landed)

    running = True
    while running:
        clock.tick(config.FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_c:
                    loop.cancel_all()
                    sprites.clear()
                    paths.clear()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                target = FramedPoint.screen(*event.pos)
                trajectory = create_trajectory(args, target, container)
                sprite = BallSprite(config.BALL_RADIUS, ball_color)
                sprites.append(sprite)
                if args.show_path:
                    paths.append(trajectory)
                loop.launch(
                    trajectory,
                    sprite.place,
                    on_complete=lambda s=sprite, t=trajectory: on_landed(s, t),
                )

        loop.tick()

        screen.fill(background)
        for trajectory in paths:
            draw_path(screen, trajectory, container)
        for sprite in sprites:
            sprite.draw(screen)
        pygame.display.flip()

    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())

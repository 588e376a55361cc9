"""
Toss - Configuration loader with flight presets.

Values come from a ``.env`` file next to the project root (if present) or
the process environment; every constant has a default.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Dict

from dotenv import load_dotenv

# Load .env from project root
_env_path = Path(__file__).parent.parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_str(key: str, default: str) -> str:
    """Get string from environment."""
    return os.getenv(key, default)


# Container (the surface balls fly across)
CONTAINER_WIDTH = _get_int('TOSS_CONTAINER_WIDTH', 1280)
CONTAINER_HEIGHT = _get_int('TOSS_CONTAINER_HEIGHT', 720)
FPS = _get_int('TOSS_FPS', 60)

# Physics
GRAVITY = _get_float('TOSS_GRAVITY', 500.0)  # pixels/second²
MIN_ASCENT_VELOCITY = _get_float('TOSS_MIN_ASCENT_VELOCITY', 120.0)  # pixels/second
FLIGHT_DURATION = _get_float('TOSS_FLIGHT_DURATION', 0.9)  # seconds
CURVE_MAGNITUDE = _get_float('TOSS_CURVE_MAGNITUDE', 0.0)  # pixels
ASCENT_POLICY = _get_str('TOSS_ASCENT_POLICY', 'stretch')

# Ball appearance
BALL_RADIUS = _get_int('TOSS_BALL_RADIUS', 12)
BALL_COLOR = _get_str('TOSS_BALL_COLOR', '#f97316')
BACKGROUND_COLOR = _get_str('TOSS_BACKGROUND_COLOR', '#0f172a')

# Debug
SHOW_PATH = _get_bool('TOSS_SHOW_PATH', False)


@dataclass
class TossPreset:
    """Flight parameters bundled for a throwing style."""
    name: str
    duration: float            # Seconds in the air
    gravity: float             # pixels/second²
    min_ascent_velocity: float # Lowest launch speed that still reads as a toss
    curve_magnitude: float     # Sideways drift at mid-flight, pixels


PRESETS: Dict[str, TossPreset] = {
    'lob': TossPreset(
        name='lob',
        duration=1.4,
        gravity=400.0,
        min_ascent_velocity=220.0,
        curve_magnitude=0.0,
    ),
    'toss': TossPreset(
        name='toss',
        duration=FLIGHT_DURATION,
        gravity=GRAVITY,
        min_ascent_velocity=MIN_ASCENT_VELOCITY,
        curve_magnitude=CURVE_MAGNITUDE,
    ),
    'throw': TossPreset(
        name='throw',
        duration=0.5,
        gravity=900.0,
        min_ascent_velocity=60.0,
        curve_magnitude=25.0,
    ),
}


def get_preset(name: str) -> TossPreset:
    """Get a flight preset by name.

    Raises:
        ValueError: If no preset has that name
    """
    if name not in PRESETS:
        available = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown preset: '{name}'. Available presets: {available}")
    return PRESETS[name]

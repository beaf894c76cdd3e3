"""
OrbCatch - Configuration loader with difficulty presets.

Display and timing settings come from the environment (optionally a .env
file next to this module). Gameplay constants and the difficulty table are
fixed.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from catcher.games.presets import get_preset

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 60)

# Longest frame fed to a single simulation step (0 = uncapped)
MAX_FRAME_DT = _get_float('MAX_FRAME_DT', 0.1)


@dataclass(frozen=True)
class DifficultyConfig:
    """Per-run parameters for one difficulty tier."""
    name: str
    lives: int
    duration: float            # Seconds on the countdown clock
    spawn_interval: float      # Seconds between spawns
    min_speed: float           # Slowest fall speed, pixels/second
    max_speed: float           # Fastest fall speed, pixels/second

    def __post_init__(self):
        if self.lives <= 0:
            raise ValueError(f'lives must be positive, got {self.lives}')
        if self.duration <= 0:
            raise ValueError(f'duration must be positive, got {self.duration}')
        if self.spawn_interval <= 0:
            raise ValueError(f'spawn_interval must be positive, got {self.spawn_interval}')
        if self.min_speed > self.max_speed:
            raise ValueError(
                f'min_speed ({self.min_speed}) must not exceed max_speed ({self.max_speed})'
            )


DIFFICULTY_PRESETS: Dict[str, DifficultyConfig] = {
    'easy': DifficultyConfig(
        name='easy',
        lives=4,
        duration=70.0,
        spawn_interval=1.0,
        min_speed=100.0,
        max_speed=200.0,
    ),
    'normal': DifficultyConfig(
        name='normal',
        lives=3,
        duration=60.0,
        spawn_interval=0.8,
        min_speed=140.0,
        max_speed=230.0,
    ),
    'hard': DifficultyConfig(
        name='hard',
        lives=3,
        duration=50.0,
        spawn_interval=0.6,
        min_speed=180.0,
        max_speed=260.0,
    ),
}

FALLBACK_DIFFICULTY = 'normal'
DEFAULT_DIFFICULTY = os.getenv('DEFAULT_DIFFICULTY', FALLBACK_DIFFICULTY)


def get_difficulty(name: str) -> DifficultyConfig:
    """Look up a difficulty tier, falling back to normal for unknown names."""
    return get_preset(DIFFICULTY_PRESETS, name, default=FALLBACK_DIFFICULTY)


# Player paddle
PADDLE_WIDTH = 90.0
PADDLE_HEIGHT = 18.0
PADDLE_SPEED = 380.0          # pixels/second
PADDLE_BOTTOM_OFFSET = 50.0   # paddle top sits this far above the bottom edge

# Orbs
GOOD_ORB_RADIUS = 12.0
BAD_ORB_RADIUS = 15.0
OFFSCREEN_MARGIN = 20.0       # orbs are dropped once centre y passes height + margin

# Scoring
POINTS_PER_GOOD_ORB = 10
STREAK_FOR_MULTIPLIER = 5
MAX_SCORE_MULTIPLIER = 3

# Power-ups
SLOW_DURATION = 5.0
SLOW_SPEED_FACTOR = 0.4
DOUBLE_DURATION = 6.0
DOUBLE_MULTIPLIER = 2

# Visual
BACKGROUND_COLOR = (10, 10, 26)
PADDLE_COLOR = (56, 189, 248)
TEXT_COLOR = (255, 255, 255)
DIM_TEXT_COLOR = (150, 150, 170)
GOOD_ORB_COLOR = (56, 189, 248)
BAD_ORB_COLOR = (249, 115, 115)
SLOW_ORB_COLOR = (34, 197, 94)
DOUBLE_ORB_COLOR = (250, 204, 21)
OVERLAY_COLOR = (0, 0, 0, 160)

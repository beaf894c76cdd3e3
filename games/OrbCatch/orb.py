"""
OrbCatch - Falling orbs and the player paddle.
"""
from dataclasses import dataclass
from enum import Enum

from models import Rectangle, Resolution
from games.OrbCatch import config


class OrbKind(Enum):
    """Types of orbs."""
    GOOD = "good"
    BAD = "bad"
    POWER_SLOW = "power_slow"
    POWER_DOUBLE = "power_double"


def radius_for(kind: OrbKind) -> float:
    """Bad orbs are drawn larger than everything else."""
    return config.BAD_ORB_RADIUS if kind == OrbKind.BAD else config.GOOD_ORB_RADIUS


@dataclass
class Orb:
    """An orb falling straight down the playfield.

    (x, y) is the centre. fall_speed is in pixels/second before the
    slow-motion factor is applied.
    """
    x: float
    y: float
    radius: float
    fall_speed: float
    kind: OrbKind

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    def fall(self, dt: float, speed_factor: float = 1.0) -> None:
        """Move down by fall_speed * speed_factor * dt."""
        self.y += self.fall_speed * speed_factor * dt

    def is_off_screen(self, height: float, margin: float = config.OFFSCREEN_MARGIN) -> bool:
        """True once the centre has passed below height + margin."""
        return self.y > height + margin


@dataclass
class Player:
    """The paddle. Owned by the run; x is kept inside the playfield."""
    x: float
    y: float
    width: float = config.PADDLE_WIDTH
    height: float = config.PADDLE_HEIGHT
    speed: float = config.PADDLE_SPEED
    moving_left: bool = False
    moving_right: bool = False

    @classmethod
    def centered(cls, playfield: Resolution) -> 'Player':
        """Paddle centred horizontally, near the bottom edge."""
        return cls(
            x=playfield.width / 2 - config.PADDLE_WIDTH / 2,
            y=playfield.height - config.PADDLE_BOTTOM_OFFSET,
        )

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    def move(self, dt: float, playfield_width: float) -> None:
        """Apply movement intent for dt seconds, then clamp to the playfield.

        Both flags set cancel each other out.
        """
        if self.moving_left:
            self.x -= self.speed * dt
        if self.moving_right:
            self.x += self.speed * dt
        self.x = max(0.0, min(playfield_width - self.width, self.x))

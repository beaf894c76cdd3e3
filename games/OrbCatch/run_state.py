"""
OrbCatch - State of a single run.

One RunState exists per run. Starting or restarting throws the old one away
and builds a fresh one; nothing is carried over.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from models import Resolution
from games.OrbCatch.config import DifficultyConfig
from games.OrbCatch.orb import Orb, Player


@dataclass
class RunState:
    """Everything the simulation step mutates.

    Invariants after every step:
        1 <= score_multiplier <= 3
        speed_factor == SLOW_SPEED_FACTOR iff slow_timer > 0, else 1.0
        gold_active iff double_timer > 0
        0 <= player.x <= playfield.width - player.width
    """
    config: DifficultyConfig
    playfield: Resolution
    player: Player

    score: int = 0
    lives: int = 0
    time_left: float = 0.0         # May go negative on the final step

    streak: int = 0
    score_multiplier: int = 1

    # Power-ups
    slow_timer: float = 0.0
    double_timer: float = 0.0
    speed_factor: float = 1.0
    gold_active: bool = False

    orbs: List[Orb] = field(default_factory=list)
    spawn_accumulator: float = 0.0

    # Stats
    good_caught: int = 0
    bad_caught: int = 0
    power_ups_caught: int = 0
    good_missed: int = 0
    best_multiplier: int = 1

    @classmethod
    def fresh(cls, config: DifficultyConfig, playfield: Resolution) -> 'RunState':
        """New run: score 0, lives and clock from the difficulty, no orbs."""
        return cls(
            config=config,
            playfield=playfield,
            player=Player.centered(playfield),
            lives=config.lives,
            time_left=config.duration,
        )

    @property
    def slow_active(self) -> bool:
        return self.slow_timer > 0

    @property
    def elapsed(self) -> float:
        """Seconds of play so far."""
        return self.config.duration - max(0.0, self.time_left)

    def summary(self) -> Dict[str, Any]:
        """Run statistics as a JSON-serializable dict."""
        return {
            'difficulty': self.config.name,
            'score': self.score,
            'lives': self.lives,
            'elapsed': round(self.elapsed, 3),
            'good_caught': self.good_caught,
            'bad_caught': self.bad_caught,
            'power_ups_caught': self.power_ups_caught,
            'good_missed': self.good_missed,
            'best_multiplier': self.best_multiplier,
        }

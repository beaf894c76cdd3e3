"""
OrbCatch - Orb spawner.

Creates orbs with a random kind, position and fall speed. When to spawn is
decided by the simulation step; this module only decides what.
"""
import random
from typing import Dict, Optional

from catcher.logging import get_logger
from games.OrbCatch.config import DifficultyConfig
from games.OrbCatch.orb import Orb, OrbKind, radius_for

log = get_logger('orbcatch.spawner')


# Relative weights: Good 3/6, every other kind 1/6
ORB_WEIGHTS: Dict[OrbKind, float] = {
    OrbKind.GOOD: 3,
    OrbKind.BAD: 1,
    OrbKind.POWER_SLOW: 1,
    OrbKind.POWER_DOUBLE: 1,
}


class OrbSpawner:
    """Spawns orbs just above the top edge of the playfield.

    The random source is injectable so runs (and tests) can be made
    deterministic.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        weights: Optional[Dict[OrbKind, float]] = None,
    ):
        """Initialize the spawner.

        Args:
            rng: Random source (default: a fresh unseeded random.Random)
            weights: Kind -> relative weight (default: ORB_WEIGHTS)
        """
        self.rng = rng or random.Random()
        self.weights = dict(weights or ORB_WEIGHTS)
        if not self.weights or sum(self.weights.values()) <= 0:
            raise ValueError('weights must contain at least one positive weight')
        if any(w < 0 for w in self.weights.values()):
            raise ValueError('weights must be non-negative')

    def choose_kind(self) -> OrbKind:
        """Draw a kind from the weighted distribution."""
        kinds = list(self.weights.keys())
        return self.rng.choices(kinds, weights=[self.weights[k] for k in kinds])[0]

    def spawn(self, difficulty: DifficultyConfig, playfield_width: float) -> Orb:
        """Create and return a new orb.

        Args:
            difficulty: Supplies the fall speed range
            playfield_width: Width the orb must fit inside

        Returns:
            New Orb with its centre one radius above the top edge
        """
        kind = self.choose_kind()
        radius = radius_for(kind)

        x = radius + self.rng.random() * (playfield_width - radius * 2)
        fall_speed = difficulty.min_speed + self.rng.random() * (
            difficulty.max_speed - difficulty.min_speed
        )

        orb = Orb(x=x, y=-radius, radius=radius, fall_speed=fall_speed, kind=kind)
        log.trace("spawned %s at x=%.1f speed=%.1f", kind.value, x, fall_speed)
        return orb

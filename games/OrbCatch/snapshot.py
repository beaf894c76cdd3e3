"""
OrbCatch - Read-only view of the game for presentation.

A GameSnapshot is rebuilt after every update and every phase change. The
renderer and any HUD read only from it, never from the RunState.
"""
import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from catcher.games.game_state import GameState
from models import Rectangle, Resolution
from games.OrbCatch.orb import Orb, OrbKind
from games.OrbCatch.run_state import RunState


class OrbView(BaseModel):
    """Position and kind of one orb."""
    x: float
    y: float
    radius: float = Field(..., gt=0)
    kind: OrbKind

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, orb: Orb) -> 'OrbView':
        return cls(x=orb.x, y=orb.y, radius=orb.radius, kind=orb.kind)


class GameSnapshot(BaseModel):
    """Everything a presenter needs to draw one frame."""
    phase: GameState
    difficulty: str
    playfield: Resolution
    score: int = Field(default=0, ge=0)
    lives: int = 0
    time_left_ceil: int = Field(default=0, ge=0)
    score_multiplier: int = Field(default=1, ge=1)
    streak: int = Field(default=0, ge=0)
    slow_active: bool = False
    gold_active: bool = False
    player: Optional[Rectangle] = None
    orbs: Tuple[OrbView, ...] = ()
    session_best: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of_run(
        cls,
        phase: GameState,
        state: RunState,
        session_best: int = 0,
    ) -> 'GameSnapshot':
        """Project a run into a snapshot."""
        return cls(
            phase=phase,
            difficulty=state.config.name,
            playfield=state.playfield,
            score=state.score,
            lives=state.lives,
            time_left_ceil=max(0, math.ceil(state.time_left)),
            score_multiplier=state.score_multiplier,
            streak=state.streak,
            slow_active=state.slow_active,
            gold_active=state.gold_active,
            player=state.player.rect,
            orbs=tuple(OrbView.of(o) for o in state.orbs),
            session_best=session_best,
        )

    @property
    def hud_lines(self) -> Tuple[str, ...]:
        """HUD text in display order."""
        return (
            f"Score: {self.score}",
            f"Lives: {self.lives}",
            f"Time: {self.time_left_ceil}",
            f"Streak x{self.score_multiplier}",
        )

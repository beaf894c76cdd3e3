"""
Catcher Event Types

Defines the notifications a game emits to its presentation layer:
- PhaseChange: the game moved between MENU, PLAYING and GAME_OVER

These types are the contract between game logic and whatever presents it.
Transition code only builds and emits events; windows, overlays and
buttons react to them instead of being driven from inside the transition.
"""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from catcher.games.game_state import GameState


class PhaseReason:
    """Why a phase transition happened."""
    START = "start"
    RESTART = "restart"
    RESET = "reset"
    TIME_UP = "time_up"
    LIVES_DEPLETED = "lives_depleted"


class PhaseChange(BaseModel):
    """
    Emitted whenever a game changes phase.

    Carries enough run context for a presenter to update its chrome
    (enable/disable controls, show the final score) without reading game
    internals.
    """
    previous: GameState = Field(..., description="Phase before the transition")
    current: GameState = Field(..., description="Phase after the transition")
    reason: str = Field(..., description="What triggered the transition")
    difficulty: str = Field(..., description="Difficulty of the run being entered or ended")
    score: int = Field(default=0, ge=0, description="Score at transition time")
    timestamp: float = Field(..., description="Monotonic clock seconds")
    message: Optional[str] = Field(default=None, description="Human-readable summary")

    model_config = ConfigDict(frozen=True)

    @property
    def is_game_over(self) -> bool:
        return self.current == GameState.GAME_OVER


PhaseListener = Callable[[PhaseChange], None]

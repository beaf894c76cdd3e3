"""
Input Event - Represents a single input action.

This is a shared module used by all games.
Uses dataclass for immutability.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InputAction(Enum):
    """What the player asked for, independent of the physical key."""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    START = "start"
    RESTART = "restart"
    SELECT_DIFFICULTY = "select_difficulty"


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    All input sources must convert their events to this common format.

    Attributes:
        action: The requested action
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        pressed: True on press, False on release (meaningful for MOVE_* actions)
        value: Action payload, e.g. the difficulty name for SELECT_DIFFICULTY
    """
    action: InputAction
    timestamp: float
    pressed: bool = True
    value: Optional[str] = None

    def __post_init__(self):
        """Validate timestamp and payload."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')
        if self.action == InputAction.SELECT_DIFFICULTY and not self.value:
            raise ValueError('SELECT_DIFFICULTY requires a difficulty name in value')

    def __str__(self) -> str:
        state = "down" if self.pressed else "up"
        payload = f", value={self.value}" if self.value else ""
        return f"InputEvent({self.action.value} {state}, t={self.timestamp:.3f}{payload})"

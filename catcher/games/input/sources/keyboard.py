"""
Keyboard Input Source - Arrow keys / A-D for movement, hotkeys for phases.

This is a shared module used by all games.
"""
import time
from typing import Dict, List, Optional, Tuple

import pygame

from catcher.games.input.input_event import InputAction, InputEvent
from catcher.games.input.sources.base import InputSource


# pygame key -> (action, value)
DEFAULT_KEY_MAP: Dict[int, Tuple[InputAction, Optional[str]]] = {
    pygame.K_LEFT: (InputAction.MOVE_LEFT, None),
    pygame.K_a: (InputAction.MOVE_LEFT, None),
    pygame.K_RIGHT: (InputAction.MOVE_RIGHT, None),
    pygame.K_d: (InputAction.MOVE_RIGHT, None),
    pygame.K_SPACE: (InputAction.START, None),
    pygame.K_RETURN: (InputAction.START, None),
    pygame.K_r: (InputAction.RESTART, None),
    pygame.K_1: (InputAction.SELECT_DIFFICULTY, 'easy'),
    pygame.K_2: (InputAction.SELECT_DIFFICULTY, 'normal'),
    pygame.K_3: (InputAction.SELECT_DIFFICULTY, 'hard'),
}

# Held keys report both press and release; the rest fire on press only
_HELD_ACTIONS = (InputAction.MOVE_LEFT, InputAction.MOVE_RIGHT)


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Converts pygame KEYDOWN/KEYUP events into InputEvents.
    Non-keyboard events are re-posted to the pygame event queue for the main loop.
    """

    def __init__(self, key_map: Optional[Dict[int, Tuple[InputAction, Optional[str]]]] = None):
        self._key_map = dict(key_map or DEFAULT_KEY_MAP)
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def translate(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """Translate one pygame event, or None if it is not a mapped key."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return None

        mapped = self._key_map.get(event.key)
        if mapped is None:
            return None

        action, value = mapped
        pressed = event.type == pygame.KEYDOWN
        if not pressed and action not in _HELD_ACTIONS:
            return None

        return InputEvent(
            action=action,
            timestamp=time.monotonic(),
            pressed=pressed,
            value=value,
        )

    def update(self, dt: float) -> None:
        """Process pygame events and collect mapped key presses."""
        for event in pygame.event.get():
            if event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key in self._key_map:
                input_event = self.translate(event)
                if input_event is not None:
                    self._event_queue.append(input_event)
            else:
                # Re-post everything else for the main loop to handle
                pygame.event.post(event)

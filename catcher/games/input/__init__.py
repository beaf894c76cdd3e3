"""
Input abstraction layer for catcher games.

Provides unified input handling so games only ever see InputEvents,
whatever device produced them.
"""

from catcher.games.input.input_event import InputAction, InputEvent
from catcher.games.input.input_manager import InputManager

__all__ = ['InputAction', 'InputEvent', 'InputManager']

"""
Catcher Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum for launcher compatibility
- presets: Named preset lookup with fallback (difficulty tiers)
- input: Keyboard input event handling

BaseGame is imported from catcher.games.base_game directly; it pulls in
pygame and the event models, which themselves depend on GameState.
"""

from catcher.games.game_state import GameState
from catcher.games.presets import get_preset, get_preset_names, is_known_preset

__all__ = [
    'GameState',
    'get_preset',
    'get_preset_names',
    'is_known_preset',
]

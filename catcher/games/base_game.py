"""Base class for all catcher games.

All games should inherit from BaseGame to ensure a consistent interface
with the launcher and the presentation layer.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from catcher.events import PhaseChange, PhaseListener
from catcher.games.game_state import GameState
from catcher.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for all catcher games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(events): Process input events
        - update(dt): Update game logic
        - render(screen): Draw the game

    Phase notifications:
        Presenters register callbacks with on_phase_change(). Subclasses
        call _emit_phase_change() after every transition.

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"
            ARGUMENTS = [
                {'name': '--difficulty', 'type': str, 'default': 'normal',
                 'help': 'Game difficulty'},
            ]

            def __init__(self, difficulty='normal', **kwargs):
                super().__init__(**kwargs)
                self._difficulty = difficulty
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to all games; game-specific ARGUMENTS take precedence
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible runs'
        },
        {
            'name': '--max-frame-dt',
            'type': float,
            'default': None,
            'help': 'Longest frame time (seconds) fed to one update (0=no cap)'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in list(cls.ARGUMENTS) + list(cls._BASE_ARGUMENTS):
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Initialization
    # =========================================================================

    def __init__(self, **kwargs):
        self._phase_listeners: List[PhaseListener] = []
        if kwargs:
            log.debug("%s ignoring unknown options: %s", self.NAME, sorted(kwargs))

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState."""
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    # =========================================================================
    # Phase Notifications
    # =========================================================================

    def on_phase_change(self, listener: PhaseListener) -> None:
        """Call listener(event) after every phase transition."""
        self._phase_listeners.append(listener)

    def remove_phase_listener(self, listener: PhaseListener) -> None:
        if listener in self._phase_listeners:
            self._phase_listeners.remove(listener)

    def _emit_phase_change(self, event: PhaseChange) -> None:
        for listener in list(self._phase_listeners):
            listener(event)

    # =========================================================================
    # Optional Methods
    # =========================================================================

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        pass

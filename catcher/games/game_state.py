"""Common GameState enum for all catcher games.

All games must use this standard GameState enum for compatibility with
the launcher and the presentation layer.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game phases.

    States:
        MENU: Waiting for the player to start a run (initial phase)
        PLAYING: Active gameplay in progress
        GAME_OVER: Run ended (time ran out or lives depleted)

    Transitions:
        MENU --start--> PLAYING
        PLAYING --time up / lives depleted--> GAME_OVER
        GAME_OVER --start/restart--> PLAYING
        PLAYING --restart--> PLAYING (fresh run)

    GAME_OVER is never terminal; a restart always leads back to PLAYING.
    """
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"

"""OrbCatch - Game Info

Paddle game: catch falling orbs against a countdown timer and a lives counter.
"""

NAME = "Orb Catcher"
DESCRIPTION = "Catch good orbs, dodge bad ones, grab power-ups before time runs out."
VERSION = "1.0.0"
AUTHOR = "Orb Catcher Team"


def get_arguments():
    """CLI argument definitions (game-specific + base)."""
    from games.OrbCatch.game_mode import OrbCatchMode
    return OrbCatchMode.get_arguments()


def get_game_mode(**kwargs):
    """Factory function to create game instance."""
    from games.OrbCatch.game_mode import OrbCatchMode
    return OrbCatchMode(**kwargs)

"""
Catcher - shared framework for paddle-and-falling-object arcade games.

Subpackages:
- catcher.games: game base class, phase enum, presets, input
- catcher.events: phase change notifications
- catcher.logging: module loggers and structured record sinks
"""

__version__ = "1.0.0"

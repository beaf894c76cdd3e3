"""
Input source implementations.
"""

from catcher.games.input.sources.base import InputSource
from catcher.games.input.sources.keyboard import KeyboardInputSource, DEFAULT_KEY_MAP

__all__ = ['InputSource', 'KeyboardInputSource', 'DEFAULT_KEY_MAP']

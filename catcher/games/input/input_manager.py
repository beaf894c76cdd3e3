"""
Input Manager - Single entry point between an input source and a game.

Games never talk to pygame directly; the main loop asks the manager for
translated InputEvents once per frame.
"""
from typing import List

from catcher.games.input.input_event import InputEvent
from catcher.games.input.sources.base import InputSource
from catcher.logging import get_logger

log = get_logger('input')


class InputManager:
    """Wraps one InputSource and buffers its events per frame.

    Usage:
        manager = InputManager(KeyboardInputSource())
        while running:
            manager.update(dt)
            game.handle_input(manager.get_events())
    """

    def __init__(self, source: InputSource):
        self._source = source
        self._events: List[InputEvent] = []

    def update(self, dt: float) -> None:
        """Read the source and collect this frame's events."""
        self._source.update(dt)
        self._events = self._source.poll_events()
        for event in self._events:
            log.trace("input %s", event)

    def get_events(self) -> List[InputEvent]:
        """Events collected by the last update()."""
        return list(self._events)

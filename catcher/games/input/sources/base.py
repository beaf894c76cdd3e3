"""
Input Source - Abstract base for anything that produces InputEvents.
"""
from abc import ABC, abstractmethod
from typing import List

from catcher.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract input source.

    Sources collect raw device input in update() and hand out translated
    InputEvents from poll_events().
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Read raw device input."""
        pass

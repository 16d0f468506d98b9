"""
Events emitted by the game engine.
Front ends subscribe to these to redraw cells, highlight the winning
line, play sounds and show the result.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Union

from .game_state import Mark
from .win_checker import WinPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveAcceptedEvent:
    """A mark was placed and the round goes on."""
    index: int
    mark: Mark


@dataclass(frozen=True)
class WinEvent:
    """A mark was placed and completed a line."""
    index: int
    mark: Mark
    pattern: WinPattern


@dataclass(frozen=True)
class DrawEvent:
    """A mark was placed and filled the board without a line."""
    index: int
    mark: Mark


@dataclass(frozen=True)
class RoundResetEvent:
    """A new round started (scores_cleared on a full reset)."""
    scores_cleared: bool


GameEvent = Union[MoveAcceptedEvent, WinEvent, DrawEvent, RoundResetEvent]
Listener = Callable[[GameEvent], None]


class EventBus:
    """
    Synchronous callback registry.

    Listeners run in subscription order on the caller's stack.
    Exceptions raised by a listener propagate to whoever triggered the event.
    """

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener):
        """Register a listener. Subscribing twice has no extra effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        """Remove a listener if it is registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, event: GameEvent):
        """Deliver an event to every listener."""
        logger.debug("Publishing %s to %d listener(s)", event, len(self._listeners))
        for listener in list(self._listeners):
            listener(event)

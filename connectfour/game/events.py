"""
events.py - Events published by a game session, and the bus that delivers them

Presentation code subscribes to these instead of being called by the engine.
Delivery is synchronous: publish() returns after every handler has run.
"""

from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Tuple, TypeVar, cast

from connectfour.utils import GameResult, Player


class Event:
    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["type"] = self.__class__.__name__
        return data


@dataclass(frozen=True)
class PiecePlaced(Event):
    row: int
    column: int
    player: Player


@dataclass(frozen=True)
class TurnChanged(Event):
    player: Player


@dataclass(frozen=True)
class GameEnded(Event):
    result: GameResult
    winner: Optional[Player] = None
    winning_line: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)

    @property
    def is_tie(self) -> bool:
        return self.result == GameResult.TIE


@dataclass(frozen=True)
class BoardCleared(Event):
    pass


@dataclass(frozen=True)
class MoveRejected(Event):
    column: object
    player: Player
    reason: str
    message: str = ""


E = TypeVar("E", bound=Event)


class EventBus:
    """Per-session publish/subscribe dispatcher."""

    def __init__(self) -> None:
        self._handlers: Dict[type, List[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type, handler: Callable[[E], None]) -> None:
        self._handlers.setdefault(event_type, []).append(cast("Callable[[Event], None]", handler))

    def unsubscribe(self, event_type: type, handler: Callable[[E], None]) -> None:
        handlers = self._handlers.get(event_type)
        if not handlers:
            return
        try:
            handlers.remove(cast("Callable[[Event], None]", handler))
        except ValueError:
            return
        if not handlers:
            self._handlers.pop(event_type, None)

    def publish(self, event: Event) -> None:
        """Deliver an event to its handlers in subscription order."""
        # Copy so a handler may unsubscribe itself mid-delivery
        handlers = self._handlers.get(type(event), []).copy()
        for handler in handlers:
            handler(event)

    def handler_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))

    def clear(self) -> None:
        self._handlers.clear()

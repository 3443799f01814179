"""Game engine and state management."""

from indigo.game.events import GameEvent, EventType
from indigo.game.state import GameState
from indigo.game.engine import GameSnapshot, IndigoGame, Side

__all__ = [
    "GameEvent",
    "EventType",
    "GameState",
    "GameSnapshot",
    "IndigoGame",
    "Side",
]

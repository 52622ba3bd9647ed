"""Core infrastructure for the Connect Four server."""

from .bus import EventBus, get_event_bus, reset_event_bus
from .config import (
    GameSettings,
    ServerSettings,
    Settings,
    get_settings,
    reset_settings,
)
from .events import Event, EventType
from .types import (
    BoardState,
    GamePhase,
    GameState,
    Move,
    MoveOutcome,
    Player,
    Position,
    RejectReason,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "ServerSettings",
    "GameSettings",
    # Types
    "Player",
    "GamePhase",
    "Position",
    "BoardState",
    "Move",
    "GameState",
    "RejectReason",
    "MoveOutcome",
    # Events
    "Event",
    "EventType",
    "EventBus",
    "get_event_bus",
    "reset_event_bus",
]

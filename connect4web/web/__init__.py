"""HTTP front end: difficulty policy, game store and FastAPI app."""

from .app import create_app
from .difficulty import DIFFICULTIES, dimensions_for
from .store import GameNotFoundError, GameSession, GameStore


__all__ = [
    "DIFFICULTIES",
    "GameNotFoundError",
    "GameSession",
    "GameStore",
    "create_app",
    "dimensions_for",
]

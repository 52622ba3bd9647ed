"""In-memory game store keyed by game id."""

import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field

from ..core.bus import EventBus, get_event_bus
from ..core.events import Event, EventType
from ..core.types import GameState, MoveOutcome
from ..game.engine import GameEngine


class GameNotFoundError(KeyError):
    """No live game with the given id."""


@dataclass
class GameSession:
    """One live game and the lock that serializes engine calls on it."""

    id: str
    state: GameState
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def snapshot(self) -> GameState:
        """Copy of the state taken under the session lock."""
        with self.lock:
            return self.state.copy()


class GameStore:
    """Owns every live GameState and funnels engine calls through per-game locks.

    The store, not the engine, publishes domain events so the engine stays
    free of side effects.
    """

    def __init__(
        self,
        engine: GameEngine | None = None,
        bus: EventBus | None = None,
        max_games: int = 256,
    ):
        if max_games < 1:
            raise ValueError(f"max_games must be positive (got {max_games})")
        self.engine = engine or GameEngine()
        self.bus = bus or get_event_bus()
        self.max_games = max_games
        self._sessions: OrderedDict[str, GameSession] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._sessions

    def create(self, player1_name: str, player2_name: str, rows: int, cols: int) -> GameSession:
        """Start a new game and return its session."""
        state = self.engine.create_game(player1_name, player2_name, rows, cols)
        session = GameSession(id=uuid.uuid4().hex, state=state)

        evicted: list[str] = []
        with self._lock:
            self._sessions[session.id] = session
            while len(self._sessions) > self.max_games:
                old_id, _ = self._sessions.popitem(last=False)
                evicted.append(old_id)

        for old_id in evicted:
            self._publish(EventType.GAME_EVICTED, {"game_id": old_id})

        self._publish(EventType.GAME_STARTED, {
            "game_id": session.id,
            "rows": rows,
            "cols": cols,
            "player1": player1_name,
            "player2": player2_name,
        })
        return session

    def get(self, game_id: str | None) -> GameSession | None:
        if game_id is None:
            return None
        with self._lock:
            return self._sessions.get(game_id)

    def _require(self, game_id: str) -> GameSession:
        session = self.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def play(self, game_id: str, column: int) -> tuple[GameState, MoveOutcome]:
        """Apply a move to a live game.

        Returns:
            A snapshot of the state after the attempt and the move outcome

        Raises:
            GameNotFoundError: If no game has this id
        """
        session = self._require(game_id)
        with session.lock:
            player = session.state.current_player
            state, outcome = self.engine.apply_move(session.state, column)
            snapshot = state.copy()

        if not outcome.accepted:
            self._publish(EventType.INVALID_MOVE, {
                "game_id": game_id,
                "column": column,
                "reason": outcome.reason.value,
            })
            return snapshot, outcome

        self._publish(EventType.MOVE_MADE, {
            "game_id": game_id,
            "column": column,
            "row": outcome.position.row,
            "player": int(player),
            "turn": snapshot.turn_count,
        })
        if snapshot.winner is not None:
            self._publish(EventType.GAME_WON, {
                "game_id": game_id,
                "winner": int(snapshot.winner),
                "positions": snapshot.winning_positions,
            })
        elif snapshot.is_draw:
            self._publish(EventType.GAME_DRAW, {"game_id": game_id})
        else:
            self._publish(EventType.TURN_CHANGED, {
                "game_id": game_id,
                "player": int(snapshot.current_player),
                "turn": snapshot.turn_count,
            })
        return snapshot, outcome

    def reset(self, game_id: str) -> GameState:
        """Reset a live game to an empty board.

        Raises:
            GameNotFoundError: If no game has this id
        """
        session = self._require(game_id)
        with session.lock:
            snapshot = self.engine.reset(session.state).copy()
        self._publish(EventType.GAME_RESET, {"game_id": game_id})
        return snapshot

    def remove(self, game_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(game_id, None) is not None

    def _publish(self, event_type: EventType, data: dict) -> None:
        self.bus.publish(Event(type=event_type, data=data, source="game_store"))

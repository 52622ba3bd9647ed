"""
Shared data types for the Connect Four engine.

These types are the contracts between the engine and its wrappers.
The engine mutates a GameState in place; wrappers only read it.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto


# ─────────────────────────────────────────────────────────────
# PLAYER & GAME PHASE
# ─────────────────────────────────────────────────────────────


class Player(IntEnum):
    """Cell contents and player identifier (0 = empty)."""

    EMPTY = 0
    ONE = 1
    TWO = 2

    def __str__(self) -> str:
        return str(self.value)

    @property
    def other(self) -> "Player":
        """Opponent of ONE/TWO."""
        if self == Player.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Player(3 - self.value)

    @property
    def symbol(self) -> str:
        """Get a single-character symbol for text display."""
        return {0: ".", 1: "X", 2: "O"}[self.value]


class GamePhase(Enum):
    """Current phase of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top, rows - 1 = bottom
    col: int  # 0 = left


@dataclass
class BoardState:
    """
    Rectangular grid of cells.

    - grid[0] is the top row
    - grid[rows - 1] is the bottom row (tokens land here first)
    - grid[row][col] contains a Player value
    """

    grid: list[list[Player]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def __getitem__(self, row: int) -> list[Player]:
        return self.grid[row]

    def to_matrix(self) -> list[list[int]]:
        """Plain integer copy of the grid (0 empty, 1/2 players)."""
        return [[int(cell) for cell in row] for row in self.grid]

    def copy(self) -> "BoardState":
        """Create a deep copy of the board."""
        return BoardState(grid=[list(row) for row in self.grid])


# ─────────────────────────────────────────────────────────────
# MOVE & GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass
class Move:
    """An accepted move."""

    column: int
    player: Player
    position: Position

    def __str__(self) -> str:
        return f"{self.player.symbol} → Column {self.column}"


@dataclass
class GameState:
    """Complete state of one game."""

    board: BoardState
    current_player: Player = Player.ONE
    winner: Player | None = None
    is_draw: bool = False
    turn_count: int = 0
    player1_name: str = "Player 1"
    player2_name: str = "Player 2"
    move_history: list[Move] = field(default_factory=list)
    winning_positions: list[Position] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    @property
    def phase(self) -> GamePhase:
        if self.winner is not None:
            return GamePhase.WON
        if self.is_draw:
            return GamePhase.DRAW
        return GamePhase.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        """True once the game is won or drawn."""
        return self.winner is not None or self.is_draw

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1] if self.move_history else None

    def player_name(self, player: Player) -> str:
        return self.player1_name if player == Player.ONE else self.player2_name

    @property
    def current_player_name(self) -> str:
        return self.player_name(self.current_player)

    @property
    def winner_name(self) -> str | None:
        return self.player_name(self.winner) if self.winner is not None else None

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            winner=self.winner,
            is_draw=self.is_draw,
            turn_count=self.turn_count,
            player1_name=self.player1_name,
            player2_name=self.player2_name,
            move_history=self.move_history.copy(),
            winning_positions=self.winning_positions.copy(),
        )


# ─────────────────────────────────────────────────────────────
# MOVE OUTCOME
# ─────────────────────────────────────────────────────────────


class RejectReason(Enum):
    """Why a move was not applied."""

    INVALID_COLUMN = "invalid_column"
    COLUMN_FULL = "column_full"
    GAME_ALREADY_OVER = "game_already_over"


@dataclass(frozen=True)
class MoveOutcome:
    """Result signal of ApplyMove. Rejected moves never touch the state."""

    accepted: bool
    reason: RejectReason | None = None
    position: Position | None = None

    @classmethod
    def accept(cls, position: Position) -> "MoveOutcome":
        return cls(accepted=True, position=position)

    @classmethod
    def reject(cls, reason: RejectReason) -> "MoveOutcome":
        return cls(accepted=False, reason=reason)

    def __bool__(self) -> bool:
        return self.accepted

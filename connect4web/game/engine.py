"""Game engine for Connect Four state transitions."""


from ..core.types import GameState, Move, MoveOutcome, Player, Position, RejectReason
from .rules import Connect4Rules


class GameEngine:
    """Applies the rules to GameState values.

    The engine holds no game of its own: every call takes the state it
    operates on. Accepted moves mutate that state in place; rejected moves
    leave it untouched. Callers sharing a state across threads must
    serialize access to it.
    """

    def __init__(self, rules: Connect4Rules | None = None):
        """Initialize game engine.

        Args:
            rules: Game rules (uses defaults if None)
        """
        self.rules = rules or Connect4Rules()

    def create_game(
        self,
        player1_name: str,
        player2_name: str,
        rows: int,
        cols: int,
    ) -> GameState:
        """Start a fresh game on an empty rows x cols board with player ONE to move.

        Raises:
            ValueError: If either dimension is not positive
        """
        return GameState(
            board=self.rules.new_board(rows, cols),
            current_player=Player.ONE,
            player1_name=player1_name,
            player2_name=player2_name,
        )

    def check_move(self, state: GameState, column: object) -> RejectReason | None:
        """Return why a move in column would be rejected, or None if it is legal."""
        if state.is_terminal:
            return RejectReason.GAME_ALREADY_OVER
        if not self.rules.is_valid_column(state.board, column):
            return RejectReason.INVALID_COLUMN
        if self.rules.get_landing_row(state.board, column) < 0:
            return RejectReason.COLUMN_FULL
        return None

    def apply_move(self, state: GameState, column: int) -> tuple[GameState, MoveOutcome]:
        """Drop the current player's token into column.

        Exactly one of win, draw or turn switch follows an accepted move,
        evaluated in that order.

        Returns:
            The same state object and the outcome of the attempt
        """
        reason = self.check_move(state, column)
        if reason is not None:
            return state, MoveOutcome.reject(reason)

        player = state.current_player
        board = state.board
        row = self.rules.get_landing_row(board, column)

        board.grid[row][column] = player
        state.turn_count += 1

        line = self.rules.winning_line(board, row, column, player)
        move = Move(column=column, player=player, position=Position(row=row, col=column))
        state.move_history.append(move)

        if line:
            state.winner = player
            state.winning_positions = line
        elif self.rules.is_draw(board):
            state.is_draw = True
        else:
            state.current_player = player.other

        return state, MoveOutcome.accept(move.position)

    def reset(self, state: GameState) -> GameState:
        """Clear the board at the same size; names are kept."""
        state.board = self.rules.new_board(state.rows, state.cols)
        state.current_player = Player.ONE
        state.winner = None
        state.is_draw = False
        state.turn_count = 0
        state.move_history = []
        state.winning_positions = []
        return state

    # ─────────────────────────────────────────────────────────
    # READ-ONLY PROJECTIONS
    # ─────────────────────────────────────────────────────────

    def board(self, state: GameState) -> list[list[int]]:
        return state.board.to_matrix()

    def current_player(self, state: GameState) -> Player:
        return state.current_player

    def winner(self, state: GameState) -> int:
        """Winning player number, 0 while nobody has won."""
        return int(state.winner) if state.winner is not None else 0

    def is_draw(self, state: GameState) -> bool:
        return state.is_draw

    def turn_count(self, state: GameState) -> int:
        return state.turn_count

    def legal_moves(self, state: GameState) -> list[int]:
        """Columns that would accept a move right now."""
        if state.is_terminal:
            return []
        return self.rules.get_legal_moves(state.board)

"""Connect Four rules for a board of any size."""


from ..core.types import BoardState, Player, Position


# (row step, col step) for each line orientation through a cell.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),   # Horizontal
    (1, 0),   # Vertical
    (1, 1),   # Diagonal down-right
    (1, -1),  # Diagonal down-left
)


class Connect4Rules:
    """Connect Four rules on a rows x cols grid.

    Win condition: win_length in a row (horizontal, vertical, or diagonal)
    through the most recently placed token.
    """

    def __init__(self, win_length: int = 4):
        """Initialize rules.

        Args:
            win_length: Number in a row to win (4 default)
        """
        if win_length < 1:
            raise ValueError(f"win_length must be positive (got {win_length})")
        self.win_length = win_length

    def new_board(self, rows: int, cols: int) -> BoardState:
        """Build an empty rows x cols board.

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive (got {rows}x{cols})")
        return BoardState(grid=[[Player.EMPTY] * cols for _ in range(rows)])

    def is_valid_column(self, board: BoardState, column: object) -> bool:
        """Check that column is an integer index into the board."""
        if isinstance(column, bool) or not isinstance(column, int):
            return False
        return 0 <= column < board.cols

    def get_landing_row(self, board: BoardState, column: int) -> int:
        """Get the row where a piece would land in given column.

        Args:
            board: Current board state
            column: Column to drop piece in

        Returns:
            Row index where piece lands, or -1 if column is full
        """
        for row in range(board.rows - 1, -1, -1):
            if board.grid[row][column] == Player.EMPTY:
                return row
        return -1  # Column full

    def get_legal_moves(self, board: BoardState) -> list[int]:
        """Get columns that aren't full."""
        return [col for col in range(board.cols) if board.grid[0][col] == Player.EMPTY]

    def count_in_direction(
        self,
        board: BoardState,
        row: int,
        col: int,
        player: Player,
        dr: int,
        dc: int,
    ) -> int:
        """Count contiguous player cells from (row, col), excluding it, stepping by (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while 0 <= r < board.rows and 0 <= c < board.cols:
            if board.grid[r][c] != player:
                break
            count += 1
            r += dr
            c += dc
        return count

    def winning_line(self, board: BoardState, row: int, col: int, player: Player) -> list[Position]:
        """Cells of the first winning run through (row, col), or [] if none.

        Orientations are tried in DIRECTIONS order.
        """
        for dr, dc in DIRECTIONS:
            back = self.count_in_direction(board, row, col, player, -dr, -dc)
            forward = self.count_in_direction(board, row, col, player, dr, dc)
            if back + 1 + forward >= self.win_length:
                return [
                    Position(row=row + i * dr, col=col + i * dc)
                    for i in range(-back, forward + 1)
                ]
        return []

    def check_win(self, board: BoardState, row: int, col: int, player: Player) -> bool:
        """Check whether the token at (row, col) completes a winning run."""
        return bool(self.winning_line(board, row, col, player))

    def is_draw(self, board: BoardState) -> bool:
        """Check whether every cell is occupied.

        Only meaningful after check_win has been ruled out for the last move.
        """
        for row in board.grid:
            if Player.EMPTY in row:
                return False
        return True

"""Tests for the pure board rules."""

import pytest

from connect4web.core.types import BoardState, Player, Position
from connect4web.game.rules import Connect4Rules


def board_from(rows: list[str]) -> BoardState:
    """Build a board from strings of '.', '1', '2' (top row first)."""
    return BoardState(grid=[[Player(int(ch)) if ch != "." else Player.EMPTY for ch in row] for row in rows])


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 5), (6, 7), (6, 9), (7, 8), (10, 3)])
def test_new_board_is_empty(rules, rows, cols):
    board = rules.new_board(rows, cols)
    assert board.rows == rows
    assert board.cols == cols
    assert sum(row.count(Player.EMPTY) for row in board.grid) == rows * cols


@pytest.mark.parametrize("rows, cols", [(0, 7), (6, 0), (-1, 4)])
def test_new_board_rejects_non_positive_dimensions(rules, rows, cols):
    with pytest.raises(ValueError):
        rules.new_board(rows, cols)


def test_rows_do_not_alias(rules):
    board = rules.new_board(3, 3)
    board.grid[0][0] = Player.ONE
    assert board.grid[1][0] == Player.EMPTY


def test_landing_row_is_lowest_empty(rules):
    board = board_from([
        "...",
        ".1.",
        "21.",
    ])
    assert rules.get_landing_row(board, 0) == 1
    assert rules.get_landing_row(board, 1) == 0
    assert rules.get_landing_row(board, 2) == 2


def test_landing_row_full_column(rules):
    board = board_from([
        "1.",
        "2.",
    ])
    assert rules.get_landing_row(board, 0) == -1
    assert rules.get_legal_moves(board) == [1]


@pytest.mark.parametrize("column, valid", [(0, True), (6, True), (-1, False), (7, False), (True, False), ("3", False), (None, False)])
def test_is_valid_column(rules, column, valid):
    assert rules.is_valid_column(rules.new_board(6, 7), column) is valid


def test_count_in_direction_stops_at_edge_and_mismatch(rules):
    board = board_from([
        "1112",
    ])
    assert rules.count_in_direction(board, 0, 0, Player.ONE, 0, 1) == 2
    assert rules.count_in_direction(board, 0, 2, Player.ONE, 0, 1) == 0
    assert rules.count_in_direction(board, 0, 0, Player.ONE, 0, -1) == 0


def test_three_in_a_row_is_not_a_win(rules):
    board = board_from([
        ".......",
        "111....",
    ])
    assert not rules.check_win(board, 1, 2, Player.ONE)


def test_horizontal_win_through_middle_cell(rules):
    board = board_from([
        ".......",
        ".11.11.",
    ])
    board.grid[1][3] = Player.ONE
    line = rules.winning_line(board, 1, 3, Player.ONE)
    assert line == [Position(1, c) for c in range(1, 6)]


def test_vertical_win(rules):
    board = board_from([
        "2..",
        "1..",
        "1..",
        "1..",
        "1..",
    ])
    assert rules.check_win(board, 1, 0, Player.ONE)
    assert not rules.check_win(board, 0, 0, Player.TWO)


def test_both_diagonals(rules):
    rising = board_from([
        "...1",
        "..1.",
        ".1..",
        "1...",
    ])
    falling = board_from([
        "2...",
        ".2..",
        "..2.",
        "...2",
    ])
    assert rules.check_win(rising, 0, 3, Player.ONE)
    assert rules.check_win(rising, 3, 0, Player.ONE)
    assert rules.check_win(falling, 1, 1, Player.TWO)


def test_no_wraparound(rules):
    board = board_from([
        "11..",
        "..11",
    ])
    assert not rules.check_win(board, 1, 2, Player.ONE)


def test_custom_win_length():
    rules = Connect4Rules(win_length=3)
    board = board_from(["111."])
    assert rules.check_win(board, 0, 0, Player.ONE)


def test_is_draw_only_when_full(rules):
    assert rules.is_draw(board_from(["12", "21"]))
    assert not rules.is_draw(board_from([".2", "21"]))

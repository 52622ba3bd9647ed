"""Tests for the command line interface."""

from typer.testing import CliRunner

from connect4web.cli.main import app, board_to_ascii
from connect4web.game import GameEngine

from .conftest import play_columns


runner = CliRunner()


def test_difficulties_lists_board_sizes():
    result = runner.invoke(app, ["difficulties"])
    assert result.exit_code == 0
    assert "normal" in result.output
    assert "hard" in result.output


def test_board_to_ascii(engine: GameEngine):
    state = engine.create_game("a", "b", 2, 3)
    play_columns(engine, state, 1, 1)
    lines = board_to_ascii(state).strip("\n").splitlines()

    assert lines[2] == "| . | O | . |"
    assert lines[4] == "| . | X | . |"


def test_play_to_a_win():
    result = runner.invoke(
        app,
        ["play", "--player1", "Ann", "--player2", "Bob"],
        input="3\n0\n3\n1\n3\n2\n3\n",
    )
    assert result.exit_code == 0
    assert "Ann (X) WINS!" in result.output


def test_play_reports_rejected_moves_and_quits():
    result = runner.invoke(app, ["play", "--rows", "1", "--cols", "2"], input="0\n0\nabc\nq\n")
    assert result.exit_code == 0
    assert "That column is full." in result.output
    assert "Enter a number 0-1" in result.output
    assert "Game quit." in result.output


def test_play_draw_on_tiny_board():
    result = runner.invoke(app, ["play", "--rows", "1", "--cols", "2"], input="0\n1\n")
    assert result.exit_code == 0
    assert "It's a DRAW!" in result.output


def test_play_reset_and_end_of_input():
    result = runner.invoke(app, ["play", "-d", "hard"], input="0\nr\n")
    assert result.exit_code == 0
    assert "Board reset." in result.output
    assert "Game quit." in result.output

"""
CLI for the Connect Four server.

Usage:
    connect4web --help
    connect4web serve --port 8080
    connect4web play --difficulty normal --player1 Ann --player2 Bob
    connect4web difficulties
"""

from typing import Annotated

import typer

from ..core.config import get_settings
from ..core.types import GameState, Player
from ..game.engine import GameEngine
from ..game.rules import Connect4Rules
from ..web.difficulty import DIFFICULTIES, dimensions_for


app = typer.Typer(
    name="connect4web",
    help="Two-player Connect Four over HTTP or in the terminal.",
    add_completion=False,
)

REJECT_MESSAGES = {
    "invalid_column": "No such column.",
    "column_full": "That column is full.",
    "game_already_over": "The game is over.",
}


def board_to_ascii(state: GameState) -> str:
    """Convert board to ASCII display."""
    cols = state.cols
    lines = ["\n " + " ".join(f"{c:>3}" for c in range(cols))]
    border = "+" + "---+" * cols
    lines.append(border)
    for row in state.board.grid:
        lines.append("|" + "|".join(f" {cell.symbol} " for cell in row) + "|")
        lines.append(border)
    return "\n".join(lines)


def print_status(state: GameState, legal_moves: list[int]) -> None:
    """Print board and game status."""
    typer.echo(board_to_ascii(state))
    typer.echo(f"\nTurn: {state.turn_count}")

    if state.last_move is not None:
        typer.echo(f"Last move: {state.last_move}")

    if state.winner is not None:
        typer.echo(f"\n{state.winner_name} ({state.winner.symbol}) WINS!")
    elif state.is_draw:
        typer.echo("\nIt's a DRAW!")
    else:
        current = state.current_player
        typer.echo(f"Current player: {state.current_player_name} ({current.symbol})")
        typer.echo(f"Legal moves: {legal_moves}")


@app.command()
def serve(
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Listen port")] = None,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
):
    """Run the HTTP server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "connect4web.web.app:create_app",
        factory=True,
        host=host or settings.server.host,
        port=port or settings.server.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def play(
    difficulty: Annotated[str | None, typer.Option("--difficulty", "-d", help="easy, normal or hard")] = None,
    rows: Annotated[int | None, typer.Option("--rows", min=1, help="Override board rows")] = None,
    cols: Annotated[int | None, typer.Option("--cols", min=1, help="Override board columns")] = None,
    player1: Annotated[str, typer.Option("--player1", help="Name of player 1")] = "Player 1",
    player2: Annotated[str, typer.Option("--player2", help="Name of player 2")] = "Player 2",
):
    """
    Play a hot-seat game in the terminal.

    Examples:
        play                         # 6x7 board
        play --difficulty hard       # 7x8 board
        play --rows 4 --cols 5       # custom board
    """
    settings = get_settings()
    default_rows, default_cols = dimensions_for(difficulty or settings.game.default_difficulty)
    engine = GameEngine(Connect4Rules(win_length=settings.game.win_length))
    state = engine.create_game(player1, player2, rows or default_rows, cols or default_cols)

    typer.echo("\n" + "=" * 50)
    typer.echo("  CONNECT FOUR")
    typer.echo("=" * 50)
    typer.echo(f"\n{player1} ({Player.ONE.symbol}) vs {player2} ({Player.TWO.symbol})")
    typer.echo(f"Enter column number (0-{state.cols - 1}) to play, 'r' to reset, 'q' to quit\n")

    while not state.is_terminal:
        print_status(state, engine.legal_moves(state))
        try:
            user_input = typer.prompt(f"\n{state.current_player_name}, your move").strip().lower()
        except (KeyboardInterrupt, typer.Abort):
            typer.echo("\nGame quit.")
            return

        if user_input == "q":
            typer.echo("Game quit.")
            return
        if user_input == "r":
            engine.reset(state)
            typer.echo("Board reset.")
            continue

        try:
            col = int(user_input)
        except ValueError:
            typer.echo(f"Enter a number 0-{state.cols - 1}")
            continue

        _, outcome = engine.apply_move(state, col)
        if not outcome.accepted:
            typer.echo(f"Invalid! {REJECT_MESSAGES[outcome.reason.value]}")

    print_status(state, engine.legal_moves(state))


@app.command()
def difficulties():
    """List difficulty levels and their board sizes."""
    typer.echo(f"{'Difficulty':<12} {'Rows':>4} {'Cols':>4}")
    typer.echo("-" * 22)
    for name, (rows, cols) in DIFFICULTIES.items():
        typer.echo(f"{name:<12} {rows:>4} {cols:>4}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()

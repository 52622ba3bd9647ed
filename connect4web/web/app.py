"""
Connect Four HTTP front end.

Thin FastAPI wrapper over GameStore: form posts in, redirects and
server-rendered pages out. Each browser holds its game id in a cookie.
"""
import logging
from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..core.bus import EventBus, get_event_bus
from ..core.config import Settings, get_settings
from ..core.events import Event, EventType
from ..core.types import GameState
from ..game.engine import GameEngine
from ..game.rules import Connect4Rules
from .difficulty import DIFFICULTIES, dimensions_for
from .store import GameNotFoundError, GameSession, GameStore

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

LIFECYCLE_EVENTS = {
    EventType.GAME_STARTED,
    EventType.GAME_WON,
    EventType.GAME_DRAW,
    EventType.GAME_RESET,
    EventType.GAME_EVICTED,
}


def log_event(event: Event) -> None:
    """Bus subscriber: game lifecycle at INFO, moves at DEBUG."""
    level = logging.INFO if event.type in LIFECYCLE_EVENTS else logging.DEBUG
    logger.log(level, "%s", event)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def state_to_dict(game_id: str, state: GameState, legal_moves: list[int]) -> dict:
    """JSON projection of a game."""
    last = state.last_move
    return {
        "id": game_id,
        "rows": state.rows,
        "cols": state.cols,
        "board": state.board.to_matrix(),
        "current_player": int(state.current_player),
        "winner": int(state.winner) if state.winner is not None else 0,
        "is_draw": state.is_draw,
        "turn_count": state.turn_count,
        "phase": state.phase.name.lower(),
        "player1_name": state.player1_name,
        "player2_name": state.player2_name,
        "legal_moves": legal_moves,
        "last_move": {"row": last.position.row, "col": last.position.col} if last else None,
        "winning_positions": [{"row": p.row, "col": p.col} for p in state.winning_positions],
    }


def _parse_column(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        return None


def create_app(
    settings: Settings | None = None,
    store: GameStore | None = None,
    bus: EventBus | None = None,
) -> FastAPI:
    """Build the application. Pass a store/bus to share state with tests."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if store is None:
        engine = GameEngine(Connect4Rules(win_length=settings.game.win_length))
        store = GameStore(engine=engine, bus=bus or get_event_bus(), max_games=settings.server.max_games)
    store.bus.subscribe_all(log_event)

    cookie_name = settings.server.cookie_name
    default_difficulty = settings.game.default_difficulty

    app = FastAPI(title="Connect Four")
    app.state.settings = settings
    app.state.store = store
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    def current_session(request: Request) -> GameSession | None:
        return store.get(request.cookies.get(cookie_name))

    def to_game() -> RedirectResponse:
        return RedirectResponse("/game", status_code=303)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request):
        has_game = current_session(request) is not None
        return templates.TemplateResponse(request, "home.html", {"has_game": has_game})

    @app.get("/start", response_class=HTMLResponse)
    def start_form(request: Request):
        return templates.TemplateResponse(request, "start.html", {
            "difficulties": DIFFICULTIES,
            "default_difficulty": default_difficulty,
        })

    @app.post("/start")
    def start_game(
        player1: str = Form(""),
        player2: str = Form(""),
        difficulty: str = Form(""),
    ):
        rows, cols = dimensions_for(difficulty or default_difficulty)
        session = store.create(
            player1.strip() or "Player 1",
            player2.strip() or "Player 2",
            rows,
            cols,
        )
        response = to_game()
        response.set_cookie(cookie_name, session.id, httponly=True, samesite="lax")
        return response

    @app.get("/game", response_class=HTMLResponse)
    def show_game(request: Request):
        session = current_session(request)
        if session is None:
            return RedirectResponse("/start", status_code=303)
        state = session.snapshot()
        return templates.TemplateResponse(request, "game.html", {
            "game_id": session.id,
            "state": state,
            "legal_moves": store.engine.legal_moves(state),
        })

    @app.api_route("/play", methods=["GET", "POST"])
    def play(request: Request, column: str = Form("")):
        if request.method != "POST":
            return to_game()
        session = current_session(request)
        col = _parse_column(column)
        if session is None or col is None:
            return to_game()
        try:
            store.play(session.id, col)
        except GameNotFoundError:
            logger.debug("Game %s vanished before move", session.id)
        return to_game()

    @app.api_route("/reset", methods=["GET", "POST"])
    def reset(request: Request):
        session = current_session(request)
        if session is not None:
            try:
                store.reset(session.id)
            except GameNotFoundError:
                logger.debug("Game %s vanished before reset", session.id)
        return to_game()

    @app.get("/api/game")
    def game_json(request: Request):
        session = current_session(request)
        if session is None:
            return JSONResponse({"detail": "No active game"}, status_code=404)
        state = session.snapshot()
        return state_to_dict(session.id, state, store.engine.legal_moves(state))

    logger.info("Connect Four app ready (difficulties: %s)", ", ".join(DIFFICULTIES))
    return app

"""Shared fixtures: fresh singletons and engine helpers."""

import pytest

from connect4web.core import EventBus, reset_event_bus, reset_settings
from connect4web.game import Connect4Rules, GameEngine


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch):
    """Keep settings and the global bus from leaking between tests."""
    for key in (
        "SERVER_HOST",
        "SERVER_PORT",
        "SERVER_COOKIE_NAME",
        "SERVER_MAX_GAMES",
        "GAME_WIN_LENGTH",
        "GAME_DEFAULT_DIFFICULTY",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    reset_event_bus()
    yield
    reset_settings()
    reset_event_bus()


@pytest.fixture
def rules() -> Connect4Rules:
    return Connect4Rules()


@pytest.fixture
def engine(rules) -> GameEngine:
    return GameEngine(rules)


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


def play_columns(engine: GameEngine, state, *columns: int):
    """Apply moves in order, failing loudly on any rejection."""
    for col in columns:
        _, outcome = engine.apply_move(state, col)
        assert outcome.accepted, f"column {col} rejected: {outcome.reason}"
    return state

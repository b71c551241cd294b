"""Frontend session — action dispatch and best-score bookkeeping."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.engine.gameplay import Game
from backend.models.bestscore import BestScoreManager
from backend.models.status import GameStatus
from frontend.session import (
    LOSE_MESSAGE,
    START_MESSAGE,
    WIN_MESSAGE,
    GameSession,
)

CHECKER = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]


@pytest.fixture
def manager(tmp_path: Path) -> BestScoreManager:
    return BestScoreManager(tmp_path / "bestscore.json")


def _session(manager, rng, layout=None) -> GameSession:
    return GameSession(Game(layout, rng=rng), manager)


def test_moves_ignored_before_start(manager, scripted) -> None:
    session = _session(manager, scripted())
    assert session.handle("left") is False
    assert session.game.get_status() is GameStatus.IDLE
    assert session.message == START_MESSAGE


@pytest.mark.parametrize("action", ["start", "enter"])
def test_start_actions(manager, scripted, action: str) -> None:
    session = _session(manager, scripted())
    assert session.handle(action) is True
    assert session.game.get_status() is GameStatus.PLAYING
    assert session.message == ""
    assert session.handle(action) is False


def test_unknown_action_is_ignored(manager, scripted) -> None:
    session = _session(manager, scripted())
    session.handle("start")
    before = session.game.get_state()
    assert session.handle("x") is False
    assert session.handle("") is False
    assert session.game.get_state() == before


def test_scoring_move_updates_best(manager, scripted) -> None:
    layout = [[0, 2, 2, 4], [0] * 4, [0] * 4, [0] * 4]
    session = _session(manager, scripted(picks=[1, 4, -1]), layout)
    session.handle("start")

    assert session.handle("left") is True
    assert session.game.get_score() == 4
    assert session.best == 4


def test_restart_keeps_best(manager, scripted) -> None:
    manager.submit(500)
    layout = [[0, 2, 2, 4], [0] * 4, [0] * 4, [0] * 4]
    session = _session(manager, scripted(picks=[1, 4, -1]), layout)
    session.handle("start")
    session.handle("left")

    assert session.handle("restart") is True
    assert session.game.get_score() == 0
    assert session.game.get_state() == layout
    assert session.best == 500


def test_win_message(manager, scripted) -> None:
    layout = [[1024, 1024, 0, 0], [0] * 4, [0] * 4, [0] * 4]
    session = _session(manager, scripted(picks=[2, 5, -1]), layout)
    session.handle("enter")
    session.handle("left")
    assert session.message == WIN_MESSAGE
    assert session.best == 2048
    assert session.handle("right") is False


def test_lose_message(manager, scripted) -> None:
    session = _session(manager, scripted(), CHECKER)
    session.handle("start")
    assert session.message == LOSE_MESSAGE
    assert session.handle("down") is False


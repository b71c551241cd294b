"""Translates frontend actions into game commands and tracks the best score.

Shared by every frontend so that key handling and best-score bookkeeping
behave the same regardless of how the board is drawn.
"""

from __future__ import annotations

from backend.engine.gameplay import Game
from backend.models.bestscore import BestScoreManager
from backend.models.board import Direction
from backend.models.status import GameStatus

START_MESSAGE = "Press Enter to start!"
WIN_MESSAGE = "You reached the target tile. You win!"
LOSE_MESSAGE = "No moves left. Game over!"

_DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


class GameSession:
    """One game plus the persistent best score it feeds."""

    def __init__(self, game: Game, best_scores: BestScoreManager) -> None:
        self.game = game
        self.best_scores = best_scores

    @property
    def best(self) -> int:
        return self.best_scores.best

    @property
    def message(self) -> str:
        """Status line for the current game, empty while playing."""
        return {
            GameStatus.IDLE: START_MESSAGE,
            GameStatus.WIN: WIN_MESSAGE,
            GameStatus.LOSE: LOSE_MESSAGE,
        }.get(self.game.get_status(), "")

    def handle(self, action: str) -> bool:
        """Apply a normalised action string.

        Returns True if the action changed the game (a move that shifted
        tiles, a start, or a restart).  Unknown actions and moves outside
        of play are ignored.
        """
        if action in _DIRECTIONS:
            if self.game.get_status() is not GameStatus.PLAYING:
                return False
            changed = self.game.move(_DIRECTIONS[action])
        elif action in ("start", "enter"):
            if self.game.get_status() is not GameStatus.IDLE:
                return False
            self.game.start()
            changed = True
        elif action == "restart":
            self.game.restart()
            changed = True
        else:
            return False

        self.best_scores.submit(self.game.get_score())
        return changed

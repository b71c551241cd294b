"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.status import GameStatus


class GameState:
    """Holds the working board, the restart snapshot, score and status."""

    def __init__(self, board: Board) -> None:
        self.board = board.copy()
        self.initial_board = board.copy()
        self.score: int = 0
        self.status: GameStatus = GameStatus.IDLE

    # -- score ----------------------------------------------------------------

    def add_score(self, points: int) -> None:
        self.score += points

    # -- lifecycle ------------------------------------------------------------

    def reset(self) -> None:
        """Return to the snapshot board with a zero score, not yet started."""
        self.board = self.initial_board.copy()
        self.score = 0
        self.status = GameStatus.IDLE

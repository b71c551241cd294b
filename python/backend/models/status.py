"""Game lifecycle status."""

from __future__ import annotations

from enum import StrEnum


class GameStatus(StrEnum):
    """Where a game is in its lifecycle.

    ``IDLE`` and ``PLAYING`` are live states; ``WIN`` and ``LOSE`` are
    terminal until the next restart.
    """

    IDLE = "idle"
    PLAYING = "playing"
    WIN = "win"
    LOSE = "lose"

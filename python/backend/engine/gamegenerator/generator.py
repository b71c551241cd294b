"""Random tile spawning for 2048 boards."""

from __future__ import annotations

import random
from typing import Protocol

from backend.models.board import Board
from backend.models.config import DEFAULT_FOUR_PROBABILITY


class RandomSource(Protocol):
    """Everything the game needs from a random number generator."""

    def pick(self, n: int) -> int:
        """Return an index in ``range(n)``, uniformly."""
        ...

    def chance(self, p: float) -> bool:
        """Return True with probability *p*."""
        ...


class SeededRandom:
    """``RandomSource`` backed by :class:`random.Random`.

    Pass a *seed* for reproducible games; ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def pick(self, n: int) -> int:
        return self._rng.randrange(n)

    def chance(self, p: float) -> bool:
        return self._rng.random() < p


class TileSpawner:
    """Drops a new 2 (or, less often, a 4) onto a random empty cell."""

    def __init__(
        self,
        rng: RandomSource | None = None,
        four_probability: float = DEFAULT_FOUR_PROBABILITY,
    ) -> None:
        self.rng: RandomSource = rng if rng is not None else SeededRandom()
        self.four_probability = four_probability

    def spawn(self, board: Board) -> tuple[int, int, int] | None:
        """Place one tile on *board* in-place.

        Returns ``(row, col, value)`` of the new tile, or ``None`` when
        the board has no empty cell.
        """
        empties = board.empty_cells()
        if not empties:
            return None

        row, col = empties[self.rng.pick(len(empties))]
        value = 4 if self.rng.chance(self.four_probability) else 2
        board.set_tile(row, col, value)
        return row, col, value

"""Shared fixtures: a scripted random source for deterministic games."""

from __future__ import annotations

import pytest


class ScriptedRandom:
    """``RandomSource`` that replays queued answers.

    ``picks`` are taken modulo the number of options, so ``-1`` means
    "the last empty cell".  Once a queue runs dry, ``pick`` returns 0
    and ``chance`` returns False (a 2 tile).
    """

    def __init__(
        self,
        picks: list[int] | None = None,
        chances: list[bool] | None = None,
    ) -> None:
        self.picks = list(picks or [])
        self.chances = list(chances or [])

    def pick(self, n: int) -> int:
        return self.picks.pop(0) % n if self.picks else 0

    def chance(self, p: float) -> bool:
        return self.chances.pop(0) if self.chances else False


@pytest.fixture
def scripted():
    """Factory for :class:`ScriptedRandom`."""
    return ScriptedRandom

"""Tile spawning and the default random source."""

from __future__ import annotations

from collections import Counter

import pytest

from backend.engine.gamegenerator import SeededRandom, TileSpawner
from backend.models.board import Board

SPAWNS = 10_000


def test_spawn_uses_picked_empty_cell(scripted) -> None:
    board = Board.from_rows([[2, 0], [0, 0]], 2)
    spawner = TileSpawner(scripted(picks=[1]))
    assert spawner.spawn(board) == (1, 0, 2)
    assert board.tiles == [[2, 0], [2, 0]]


def test_spawn_four_when_chance_hits(scripted) -> None:
    board = Board.empty(2)
    spawner = TileSpawner(scripted(chances=[True]), four_probability=0.1)
    assert spawner.spawn(board) == (0, 0, 4)


def test_spawn_on_full_board_is_a_no_op(scripted) -> None:
    board = Board.from_rows([[2, 4], [8, 16]], 2)
    assert TileSpawner(scripted()).spawn(board) is None
    assert board.tiles == [[2, 4], [8, 16]]


def test_seeded_random_is_reproducible() -> None:
    a, b = SeededRandom(7), SeededRandom(7)
    assert [a.pick(16) for _ in range(50)] == [b.pick(16) for _ in range(50)]
    assert [a.chance(0.5) for _ in range(50)] == [b.chance(0.5) for _ in range(50)]


@pytest.mark.parametrize("p", [0.0, 1.0])
def test_seeded_random_chance_extremes(p: float) -> None:
    rng = SeededRandom(1)
    assert all(rng.chance(p) is bool(p) for _ in range(100))


def test_spawn_distribution() -> None:
    spawner = TileSpawner(SeededRandom(2048))
    values: Counter[int] = Counter()
    cells: Counter[tuple[int, int]] = Counter()

    for _ in range(SPAWNS):
        board = Board.empty(4)
        row, col, value = spawner.spawn(board)
        values[value] += 1
        cells[(row, col)] += 1

    assert set(values) == {2, 4}
    assert 0.08 < values[4] / SPAWNS < 0.12
    # Every cell is reachable, and none is wildly favoured.
    assert len(cells) == 16
    assert max(cells.values()) < 2 * SPAWNS / 16

"""Board model for the 2048 game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def slide_and_merge(row: list[int], reverse: bool = False) -> tuple[list[int], int]:
    """Slide one line toward its start and merge equal neighbours once.

    With ``reverse=True`` the line moves toward its end instead.  Returns
    the new line and the points gained by its merges.

    Example::

        slide_and_merge([0, 2, 2, 4])        # ([4, 4, 0, 0], 4)
        slide_and_merge([2, 2, 2, 0], True)  # ([0, 0, 2, 4], 4)
    """
    size = len(row)
    line = row[::-1] if reverse else row[:]

    compact = [v for v in line if v != 0]

    gained = 0
    i = 0
    while i < len(compact) - 1:
        if compact[i] == compact[i + 1]:
            compact[i] *= 2
            gained += compact[i]
            compact[i + 1] = 0
            i += 2  # a tile merges at most once per move
        else:
            i += 1

    compact = [v for v in compact if v != 0]
    compact.extend([0] * (size - len(compact)))

    return (compact[::-1] if reverse else compact), gained


def _is_cell_value(value: object) -> bool:
    """True for 0 (empty) or a power of two of at least 2."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value == 0 or (value >= 2 and not value & (value - 1))


@dataclass
class Board:
    """Represents the 2048 grid.

    Tiles are stored as a 2D list of ints. 0 represents an empty cell.
    """

    size: int
    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> Board:
        return cls(size=size, tiles=[[0] * size for _ in range(size)])

    @classmethod
    def from_rows(cls, rows: list[list[int]] | None, size: int) -> Board | None:
        """Copy *rows* into a new board, or return ``None`` if unusable.

        A layout is usable when it is a ``size`` × ``size`` grid whose
        cells are 0 or a power of two of at least 2.  The caller's lists
        are never aliased.
        """
        if not isinstance(rows, (list, tuple)) or len(rows) != size:
            return None
        tiles: list[list[int]] = []
        for row in rows:
            if not isinstance(row, (list, tuple)) or len(row) != size:
                return None
            if not all(_is_cell_value(v) for v in row):
                return None
            tiles.append(list(row))
        return cls(size=size, tiles=tiles)

    # -- queries --------------------------------------------------------------

    def rows(self) -> list[list[int]]:
        """Return a deep copy of the grid as plain lists."""
        return [row[:] for row in self.tiles]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Coordinates of all empty cells, in row-major order."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] == 0
        ]

    def has_empty_cell(self) -> bool:
        return any(v == 0 for row in self.tiles for v in row)

    def max_tile(self) -> int:
        return max((v for row in self.tiles for v in row), default=0)

    def has_merge_available(self) -> bool:
        """Check if any two side-by-side or stacked tiles are equal."""
        n = self.size
        for r in range(n):
            for c in range(n - 1):
                if self.tiles[r][c] == self.tiles[r][c + 1]:
                    return True
        for c in range(n):
            for r in range(n - 1):
                if self.tiles[r][c] == self.tiles[r + 1][c]:
                    return True
        return False

    def serialize(self) -> str:
        """Value- and position-sensitive text form, used to detect changes."""
        return "|".join(",".join(str(v) for v in row) for row in self.tiles)

    # -- mutation -------------------------------------------------------------

    def set_tile(self, row: int, col: int, value: int) -> None:
        self.tiles[row][col] = value

    def transpose(self) -> None:
        """Flip the grid across its main diagonal in place."""
        n = self.size
        for r in range(n):
            for c in range(r + 1, n):
                self.tiles[r][c], self.tiles[c][r] = (
                    self.tiles[c][r],
                    self.tiles[r][c],
                )

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.rows())

"""Core gameplay logic — processes moves and tracks win/lose."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import RandomSource, TileSpawner
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction, slide_and_merge
from backend.models.config import GameConfig
from backend.models.status import GameStatus

logger = logging.getLogger(__name__)


class Game:
    """Orchestrates a single 2048 session.

    The game starts ``idle``; :meth:`start` drops two tiles and begins
    play.  Moves are accepted only while ``playing`` and report whether
    the board changed.  Commands never raise: anything invoked at the
    wrong time is a no-op.

    Not thread-safe.  Hosts driving a game from several threads must
    serialize every command call.
    """

    def __init__(
        self,
        initial_state: list[list[int]] | None = None,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self._spawner = TileSpawner(rng, self.config.four_probability)

        board = Board.from_rows(initial_state, self.config.size)
        if board is None:
            if initial_state:
                logger.warning(
                    "Initial layout is not a %dx%d grid of non-negative ints; "
                    "starting from an empty board.",
                    self.config.size,
                    self.config.size,
                )
            board = Board.empty(self.config.size)
        self.state = GameState(board)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def target(self) -> int:
        return self.config.target

    @property
    def best_tile(self) -> int:
        return self.state.board.max_tile()

    def get_score(self) -> int:
        return self.state.score

    def get_state(self) -> list[list[int]]:
        """Return a copy of the board that callers may freely modify."""
        return self.state.board.rows()

    def get_status(self) -> GameStatus:
        return self.state.status

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Drop two tiles and begin play.  Does nothing unless idle."""
        if self.state.status is not GameStatus.IDLE:
            return

        self._spawner.spawn(self.state.board)
        self._spawner.spawn(self.state.board)

        self.state.status = GameStatus.PLAYING
        logger.debug("Game started")
        self._update_status()

    def restart(self) -> None:
        """Go back to the initial board, zero score, not started."""
        self.state.reset()
        logger.debug("Game restarted")

    # -- movement -------------------------------------------------------------

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def move_up(self) -> bool:
        return self.move(Direction.UP)

    def move_down(self) -> bool:
        return self.move(Direction.DOWN)

    def move(self, direction: Direction | str) -> bool:
        """Slide every tile in *direction*, merging equal neighbours.

        Returns True if the board changed, in which case one new tile is
        spawned and the win/lose status re-evaluated.
        """
        if self.state.status is not GameStatus.PLAYING:
            return False
        try:
            direction = Direction(direction)
        except ValueError:
            return False

        board = self.state.board
        before = board.serialize()

        if direction in (Direction.LEFT, Direction.RIGHT):
            self._move_rows(reverse=direction is Direction.RIGHT)
        else:
            # Columns become rows; DOWN on the transposed grid is RIGHT.
            board.transpose()
            self._move_rows(reverse=direction is Direction.DOWN)
            board.transpose()

        changed = board.serialize() != before
        if changed:
            self._spawner.spawn(board)
            self._update_status()
        return changed

    # -- helpers --------------------------------------------------------------

    def _move_rows(self, reverse: bool) -> None:
        tiles = self.state.board.tiles
        for r, row in enumerate(tiles):
            tiles[r], gained = slide_and_merge(row, reverse)
            self.state.add_score(gained)

    def _update_status(self) -> None:
        board = self.state.board
        previous = self.state.status

        if board.max_tile() >= self.config.target:
            self.state.status = GameStatus.WIN
        elif not board.has_empty_cell() and not board.has_merge_available():
            self.state.status = GameStatus.LOSE
        else:
            self.state.status = GameStatus.PLAYING

        if self.state.status is not previous:
            logger.debug(
                "Status %s -> %s (score %d)", previous, self.state.status, self.state.score
            )

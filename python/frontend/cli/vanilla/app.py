"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import sys
from pathlib import Path

from backend.engine.gamegenerator import SeededRandom
from backend.engine.gameplay import Game
from backend.models.bestscore import BestScoreManager
from backend.models.config import GameConfig
from backend.models.status import GameStatus
from frontend.cli.input_handler import get_key
from frontend.session import GameSession


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_M = "\033[35;1m"    # bold magenta
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _tile_colour(value: int) -> str:
    if value <= 4:
        return ""
    if value <= 64:
        return _Y
    if value <= 512:
        return _M
    return _G


# -- board rendering ----------------------------------------------------------


def render_board(tiles: list[list[int]], target: int) -> str:
    """Return an ANSI-coloured text representation of the grid."""
    widest = max((v for row in tiles for v in row), default=0)
    width = max(len(str(target)), len(str(widest)))
    cell_w = width + 2  # padding
    size = len(tiles)
    sep = "+" + (("-" * cell_w + "+") * size)

    lines: list[str] = [sep]
    for row in tiles:
        cells: list[str] = []
        for val in row:
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            else:
                cells.append(f"{_tile_colour(val)} {val:>{width}} {_R}")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_game(session: GameSession, show_help: bool = False) -> None:
    game = session.game
    status = game.get_status()

    _clear()
    print(f"  {_C}=== 2048 ==={_R}")
    print()
    print(
        f"  Score: {_Y}{game.get_score()}{_R}  |  "
        f"Best: {_Y}{session.best}{_R}"
    )
    print()
    print(render_board(game.get_state(), game.target))
    print()

    message = session.message
    if status is GameStatus.WIN:
        print(f"  {_G}★ {message} ★{_R}")
    elif status is GameStatus.LOSE:
        print(f"  {_RED}{message}{_R}")
    elif message:
        print(f"  {_C}{message}{_R}")

    if show_help:
        print()
        print("  Slide the tiles; equal tiles merge into their sum.")
        print(f"  Reach {_BOLD}{game.target}{_R} to win.")

    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}Enter{_R}: start  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: quit"
    )
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    show_help = False

    while True:
        _show_game(session, show_help)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        if key == "help":
            show_help = not show_help
            continue
        session.handle(key)


# -- public entry point -------------------------------------------------------


def run(
    data_dir: Path,
    config: GameConfig | None = None,
    seed: int | None = None,
) -> None:
    """Launch the vanilla CLI."""
    game = Game(config=config, rng=SeededRandom(seed))
    manager = BestScoreManager(data_dir / "bestscore.json")
    _play(GameSession(game, manager))

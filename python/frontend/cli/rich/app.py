"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler, session and backend as the vanilla CLI.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import SeededRandom
from backend.engine.gameplay import Game
from backend.models.bestscore import BestScoreManager
from backend.models.config import GameConfig
from backend.models.status import GameStatus
from frontend.cli.input_handler import get_key
from frontend.session import GameSession

console = Console()

_TILE_STYLES: dict[int, str] = {
    2: "bold #776e65 on #eee4da",
    4: "bold #776e65 on #ede0c8",
    8: "bold white on #f2b179",
    16: "bold white on #f59563",
    32: "bold white on #f67c5f",
    64: "bold white on #f65e3b",
    128: "bold white on #edcf72",
    256: "bold white on #edcc61",
    512: "bold white on #edc850",
    1024: "bold white on #edc53f",
    2048: "bold white on #edc22e",
}
_BIG_TILE_STYLE = "bold white on #3c3a32"


def _tile_style(value: int) -> str:
    return _TILE_STYLES.get(value, _BIG_TILE_STYLE)


# -- board rendering ----------------------------------------------------------


def render_board(tiles: list[list[int]], target: int) -> Table:
    """Return a Rich Table representing the grid."""
    widest = max((v for row in tiles for v in row), default=0)
    width = max(len(str(target)), len(str(widest)))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="#bbada0",
        padding=(0, 1),
    )
    for _ in tiles:
        table.add_column(width=width + 2, justify="center")

    for row in tiles:
        cells: list[Text] = []
        for val in row:
            if val == 0:
                cells.append(Text("·", style="dim"))
            else:
                cells.append(Text(f" {val:>{width}} ", style=_tile_style(val)))
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_game(session: GameSession, show_help: bool = False) -> None:
    game = session.game
    status = game.get_status()

    console.clear()

    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(game.get_score()), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(session.best), style="bold yellow")

    board_table = render_board(game.get_state(), game.target)
    parts: list[Align | Text] = [Align.center(stats), Text(""), Align.center(board_table)]

    message = session.message
    if status is GameStatus.WIN:
        parts.append(Align.center(Text(f"\n★ {message} ★", style="bold green")))
    elif status is GameStatus.LOSE:
        parts.append(Align.center(Text(f"\n{message}", style="bold red")))
    elif message:
        parts.append(Align.center(Text(f"\n{message}", style="bold cyan")))

    if show_help:
        parts.append(
            Align.center(
                Text(
                    "\nSlide the tiles; equal tiles merge into their sum.\n"
                    f"Reach {game.target} to win.",
                    style="dim",
                )
            )
        )

    border = {
        GameStatus.WIN: "bold green",
        GameStatus.LOSE: "red",
    }.get(status, "bright_blue")

    panel = Panel(
        Group(*parts),
        title=f"[bold]2 0 4 8[/bold]  [dim]{game.size}×{game.size}[/dim]",
        border_style=border,
        padding=(1, 2),
    )

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  start   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  help   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    show_help = False

    while True:
        _draw_game(session, show_help)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
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
    """Launch the Rich CLI."""
    game = Game(config=config, rng=SeededRandom(seed))
    manager = BestScoreManager(data_dir / "bestscore.json")
    _play(GameSession(game, manager))

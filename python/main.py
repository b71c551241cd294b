#!/usr/bin/env python3
"""2048 in the terminal.

Usage::

    python main.py                   # interactive menu
    python main.py -f rich           # Rich terminal
    python main.py -f vanilla --seed 7
    python main.py --target 512      # shorter game
    python main.py --best            # show the best score
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.config import DEFAULT_TARGET, GameConfig  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _print_best() -> None:
    from backend.models.bestscore import BestScoreManager

    manager = BestScoreManager(DATA_DIR / "bestscore.json")
    print(f"\n  Best score: {manager.best}\n")


def _configure_logging(verbose: bool) -> None:
    # Log to a file: the frontends own the terminal.
    if not verbose:
        return
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=DATA_DIR / "2048.log",
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _launch(frontend: Frontend, config: GameConfig, seed: int | None) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(data_dir=DATA_DIR, config=config, seed=seed)


def _menu_loop(config: GameConfig, seed: int | None) -> None:
    while True:
        print()
        print("  ====================================")
        print("               2 0 4 8                ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  View Best Score")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice == "1":
            _launch(Frontend.vanilla, config, seed)
        elif choice == "2":
            _launch(Frontend.rich, config, seed)
        elif choice == "3":
            _print_best()
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    target: int = typer.Option(
        DEFAULT_TARGET, "-t", "--target",
        min=4,
        help="Tile value that wins the game (a power of two).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the tile spawner for a reproducible game.",
    ),
    best: bool = typer.Option(
        False, "--best",
        help="Show the best score and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Write debug logs to data/2048.log.",
    ),
) -> None:
    """2048 in the terminal."""
    if best:
        _print_best()
        return

    try:
        config = GameConfig(target=target)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--target") from exc

    _configure_logging(verbose)

    if frontend is None:
        _menu_loop(config, seed)
        return

    _launch(frontend, config, seed)


if __name__ == "__main__":
    app()

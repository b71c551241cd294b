"""Keypress reader for the terminal frontends.

Turns raw keys into the action strings :class:`frontend.session.GameSession`
and the frontend loops act on.  Arrow keys are recognised both as the
ANSI ``ESC [ A-D`` sequences of Unix terminals and as the two-byte
``\\xe0``/``\\x00`` codes ``msvcrt`` reports on Windows.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

ACTIONS = frozenset(
    {"up", "down", "left", "right", "start", "enter", "restart", "quit", "help"}
)

_KEYS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "start",
    "\r": "enter",
    "\n": "enter",
    "r": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "h": "help",
    "?": "help",
}

_ANSI_ARROWS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}
_MSVCRT_ARROWS: dict[str, str] = {"H": "up", "P": "down", "M": "right", "K": "left"}
_MSVCRT_PREFIXES = ("\x00", "\xe0")


def resolve(ch: str) -> str:
    """Map a single character to an action, or ``""`` if it has none.

    Letters are matched case-insensitively.
    """
    return _KEYS.get(ch.lower() if ch.isalpha() else ch, "")


def decode(read: Callable[[], str]) -> str:
    """Read one keypress through *read* and return its action.

    *read* returns one character per call; escape sequences and
    Windows prefixed codes pull the extra characters they need.
    """
    ch = read()

    if ch == "\x1b":
        if read() != "[":
            return "quit"  # bare Escape
        return _ANSI_ARROWS.get(read(), "")

    if ch in _MSVCRT_PREFIXES:
        return _MSVCRT_ARROWS.get(read(), "")

    return resolve(ch)


# -- platform readers ------------------------------------------------------------


def _read_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    # latin-1 keeps the 0xE0 arrow prefix as a single "\xe0" character.
    return msvcrt.getch().decode("latin-1")


def get_key() -> str:
    """Block for one keypress and return its action (see :data:`ACTIONS`).

    Keys without a binding return ``""``.
    """
    return decode(_read_windows if os.name == "nt" else _read_unix)

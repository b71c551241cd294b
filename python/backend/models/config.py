"""Tunable game constants."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 4
DEFAULT_TARGET = 2048
DEFAULT_FOUR_PROBABILITY = 0.1


@dataclass(frozen=True)
class GameConfig:
    """Board size, winning tile and the chance that a spawned tile is a 4."""

    size: int = DEFAULT_SIZE
    target: int = DEFAULT_TARGET
    four_probability: float = DEFAULT_FOUR_PROBABILITY

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        if self.target < 4 or self.target & (self.target - 1):
            raise ValueError(
                f"Target must be a power of two of at least 4, got {self.target}."
            )
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(
                "Four-probability must be within [0, 1], "
                f"got {self.four_probability}."
            )

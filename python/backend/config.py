"""Game configuration shared by the engine and its frontends."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.engine.gamegenerator import DEFAULT_SCRAMBLE_STEPS

DEFAULT_SIZE = 9
MIN_SIZE = 1
MAX_SIZE = 32


@dataclass(frozen=True)
class GameConfig:
    size: int = DEFAULT_SIZE
    scramble_steps: int = DEFAULT_SCRAMBLE_STEPS
    seed: int | None = None
    lock_after_solve: bool = True

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise ValueError(
                f"Grid size must be between {MIN_SIZE} and {MAX_SIZE}, got {self.size}."
            )
        if self.scramble_steps < 0:
            raise ValueError(
                f"Scramble steps must be non-negative, got {self.scramble_steps}."
            )

    def make_rng(self) -> random.Random:
        """Return a random source, seeded when a seed is configured."""
        return random.Random(self.seed)

"""Generates solvable sliding puzzle grids."""

from __future__ import annotations

import logging
import random

from backend.models.grid import BLANK, Grid, Position

logger = logging.getLogger(__name__)

DEFAULT_SCRAMBLE_STEPS = 1000


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Grid:
        """Return the goal-state grid (labels in order, blank bottom-right)."""
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}.")
        flat = list(range(1, size * size)) + [BLANK]
        return Grid.from_flat(size, flat)

    @staticmethod
    def scramble(
        grid: Grid,
        steps: int = DEFAULT_SCRAMBLE_STEPS,
        rng: random.Random | None = None,
    ) -> None:
        """Scramble *grid* in-place with a random walk of the blank.

        Every step swaps the blank with one of its in-bounds neighbours,
        so the result stays reachable from (and back to) the start.
        """
        if steps < 0:
            raise ValueError(f"Scramble steps must be non-negative, got {steps}.")
        rng = rng or random.Random()

        blank = grid.blank_pos()
        skipped = 0
        for _ in range(steps):
            neighbors = GameGenerator._get_neighbors(grid, blank)
            if not neighbors:
                skipped += 1
                continue
            target = rng.choice(neighbors)
            grid.swap(blank, target)
            blank = target

        logger.debug(
            "Scrambled %dx%d grid with %d steps (%d skipped)",
            grid.size, grid.size, steps, skipped,
        )

    @staticmethod
    def generate(
        size: int,
        steps: int = DEFAULT_SCRAMBLE_STEPS,
        rng: random.Random | None = None,
    ) -> Grid:
        """Return a scrambled, solvable grid of the given size.

        The result may happen to be solved (e.g. ``steps == 0`` or
        ``size == 1``); it is not regenerated.
        """
        grid = GameGenerator.solved(size)
        GameGenerator.scramble(grid, steps, rng)
        return grid

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(grid: Grid, blank: Position | None) -> list[Position]:
        if blank is None:
            return []
        br, bc = blank
        neighbors: list[Position] = []
        for dr, dc in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            nr, nc = br + dr, bc + dc
            if grid.in_bounds(nr, nc):
                neighbors.append(Position(nr, nc))
        return neighbors

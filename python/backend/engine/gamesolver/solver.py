"""Sliding puzzle solver for small boards."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamevalidator import Validator
from backend.models.grid import BLANK, Grid

logger = logging.getLogger(__name__)

DEFAULT_MAX_STATES = 500_000


class SearchLimitExceeded(RuntimeError):
    """Raised when a search expands more states than it was allowed."""


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(grid: Grid, max_states: int = DEFAULT_MAX_STATES) -> list[int]:
        """Return the labels to move, in order, to solve *grid*.

        Breadth-first, so the answer is a shortest solution. Returns
        ``[]`` if the grid is already solved, unsolvable, or corrupt.
        """
        if grid.is_solved():
            return []

        if not Solver.is_solvable(grid):
            return []

        n = grid.size
        start = tuple(grid.flat())
        goal = tuple(range(1, n * n)) + (BLANK,)
        adjacency = Solver._adjacency(n)

        # state -> (previous state, label moved to reach it)
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], int] | None] = {start: None}
        queue = deque([start])

        while queue:
            state = queue.popleft()
            if state == goal:
                return Solver._unwind(parents, goal)

            blank = state.index(BLANK)
            for i in adjacency[blank]:
                nxt = list(state)
                nxt[blank], nxt[i] = nxt[i], BLANK
                key = tuple(nxt)
                if key in parents:
                    continue
                parents[key] = (state, state[i])
                if len(parents) > max_states:
                    raise SearchLimitExceeded(
                        f"Gave up after {max_states} states on a {n}×{n} board."
                    )
                queue.append(key)

        # Unreachable for a solvable board.
        logger.warning("Search exhausted without reaching the goal")
        return []

    @staticmethod
    def hint(grid: Grid, max_states: int = DEFAULT_MAX_STATES) -> int | None:
        """Return the single best next label to move, or ``None`` if solved / unsolvable."""
        if grid.is_solved():
            return None

        moves = Solver.solve(grid, max_states)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(grid: Grid) -> bool:
        """Return True if *grid* can reach the goal state by legal moves."""
        if not Validator.validate(grid).ok:
            return False

        n = grid.size
        flat = grid.flat()
        tiles = [v for v in flat if v != BLANK]
        inversions = 0
        for i in range(len(tiles)):
            for j in range(i + 1, len(tiles)):
                if tiles[i] > tiles[j]:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - flat.index(BLANK) // n
        return (inversions + blank_row_from_bottom) % 2 == 0

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _adjacency(n: int) -> list[tuple[int, ...]]:
        adj: list[tuple[int, ...]] = []
        for i in range(n * n):
            r, c = divmod(i, n)
            nb: list[int] = []
            if r > 0:     nb.append(i - n)
            if r < n - 1: nb.append(i + n)
            if c > 0:     nb.append(i - 1)
            if c < n - 1: nb.append(i + 1)
            adj.append(tuple(nb))
        return adj

    @staticmethod
    def _unwind(
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], int] | None],
        goal: tuple[int, ...],
    ) -> list[int]:
        labels: list[int] = []
        step = parents[goal]
        while step is not None:
            prev, label = step
            labels.append(label)
            step = parents[prev]
        labels.reverse()
        return labels

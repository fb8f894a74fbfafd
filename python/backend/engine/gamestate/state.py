"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from backend.models.grid import Grid


class Phase(StrEnum):
    CREATED = "created"
    SCRAMBLED = "scrambled"
    PLAYING = "playing"
    SOLVED = "solved"


class GameState:
    """Holds the current grid, move counter, and solved flag."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.moves: int = 0
        self.phase: Phase = Phase.CREATED

    # -- transitions ----------------------------------------------------------

    def mark_scrambled(self) -> None:
        if self.phase is Phase.CREATED:
            self.phase = Phase.SCRAMBLED

    def record_move(self) -> None:
        """Count a successful move and update the phase.

        ``SOLVED`` is terminal: once reached, later moves (if the session
        allows them) still count but never leave it.
        """
        self.moves += 1
        if self.phase is Phase.SOLVED:
            return
        self.phase = Phase.SOLVED if self.grid.is_solved() else Phase.PLAYING

    # -- queries --------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.phase is Phase.SOLVED

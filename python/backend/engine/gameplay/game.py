"""Core gameplay logic — processes moves and tracks the win condition."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import StrEnum

from backend.config import GameConfig
from backend.engine.gamegenerator import DEFAULT_SCRAMBLE_STEPS, GameGenerator
from backend.engine.gameplay.rules import MoveRules
from backend.engine.gamestate import GameState, Phase
from backend.engine.gamevalidator import Validator
from backend.models.grid import BLANK, Direction, Grid
from backend.models.validation import ValidationResult

logger = logging.getLogger(__name__)


class MoveStatus(StrEnum):
    MOVED = "moved"
    SOLVED = "solved"
    BLANK = "blank"
    NOT_FOUND = "not_found"
    ILLEGAL = "illegal"
    LOCKED = "locked"


@dataclass(frozen=True)
class MoveOutcome:
    status: MoveStatus
    label: int | None
    moves: int
    solved: bool

    @property
    def moved(self) -> bool:
        return self.status in (MoveStatus.MOVED, MoveStatus.SOLVED)


class GamePlay:
    """Orchestrates a single game session.

    A session is never reset in place; restarting means building a new
    ``GamePlay``.
    """

    def __init__(
        self,
        grid: Grid,
        *,
        lock_after_solve: bool = True,
    ) -> None:
        self.size = grid.size
        self.lock_after_solve = lock_after_solve
        self.state = GameState(grid)
        self.validation: ValidationResult = Validator.validate(grid)

    @classmethod
    def start(
        cls,
        size: int,
        steps: int = DEFAULT_SCRAMBLE_STEPS,
        rng: random.Random | None = None,
        *,
        lock_after_solve: bool = True,
    ) -> GamePlay:
        """Create a solved grid, scramble it, and validate it before play."""
        grid = GameGenerator.solved(size)
        GameGenerator.scramble(grid, steps, rng)
        game = cls(grid, lock_after_solve=lock_after_solve)
        game.state.mark_scrambled()
        logger.debug(
            "Started %dx%d session (steps=%d, valid=%s)",
            size, size, steps, game.validation.ok,
        )
        return game

    @classmethod
    def from_config(cls, config: GameConfig, rng: random.Random | None = None) -> GamePlay:
        return cls.start(
            config.size,
            config.scramble_steps,
            rng or config.make_rng(),
            lock_after_solve=config.lock_after_solve,
        )

    @classmethod
    def from_grid(cls, grid: Grid, *, lock_after_solve: bool = True) -> GamePlay:
        """Create a session around an existing grid (e.g. a hand-built board)."""
        return cls(grid, lock_after_solve=lock_after_solve)

    # -- movement -------------------------------------------------------------

    def attempt_move(self, label: int) -> MoveOutcome:
        """Slide tile *label* into the adjacent blank.

        Illegal attempts leave the grid, the move counter and the phase
        untouched.
        """
        grid = self.state.grid
        if self.state.is_solved and self.lock_after_solve:
            status = MoveStatus.LOCKED
        elif label == BLANK:
            status = MoveStatus.BLANK
        elif grid.locate(label) is None:
            status = MoveStatus.NOT_FOUND
        elif not MoveRules.apply_move(grid, label):
            status = MoveStatus.ILLEGAL
        else:
            was_solved = self.state.is_solved
            self.state.record_move()
            status = MoveStatus.MOVED
            if self.state.is_solved and not was_solved:
                status = MoveStatus.SOLVED
                logger.info("Solved %dx%d puzzle in %d moves", self.size, self.size, self.state.moves)

        if status not in (MoveStatus.MOVED, MoveStatus.SOLVED):
            logger.debug("Rejected move of %s: %s", label, status.value)
        return MoveOutcome(
            status=status,
            label=label,
            moves=self.state.moves,
            solved=self.state.is_solved,
        )

    def move(self, direction: Direction) -> MoveOutcome:
        """Slide the tile that can travel in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        label = MoveRules.tile_in_direction(self.state.grid, direction)
        if label is None:
            locked = self.state.is_solved and self.lock_after_solve
            return MoveOutcome(
                status=MoveStatus.LOCKED if locked else MoveStatus.ILLEGAL,
                label=None,
                moves=self.state.moves,
                solved=self.state.is_solved,
            )
        return self.attempt_move(label)

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    def revalidate(self) -> ValidationResult:
        """Re-run the integrity check on the current grid."""
        self.validation = Validator.validate(self.state.grid)
        return self.validation

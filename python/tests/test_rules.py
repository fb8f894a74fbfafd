"""Move-rule tests: adjacency, atomic moves, and directional lookup."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.rules import MoveRules
from backend.models.grid import Direction, Grid, Position

SOLVED_3 = [1, 2, 3, 4, 5, 6, 7, 8, 0]


# -- adjacency ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        (6, True),   # above the blank
        (8, True),   # left of the blank
        (5, False),  # diagonal
        (3, False),  # same column, two away
        (7, False),  # same row, two away
        (0, False),  # the blank itself
    ],
)
def test_is_adjacent(label: int, expected: bool) -> None:
    grid = Grid.from_flat(3, SOLVED_3)
    assert MoveRules.is_adjacent(grid, label) is expected


def test_no_wraparound() -> None:
    # Blank at (1, 0); 3 sits at (0, 2), the end of the previous row.
    grid = Grid.from_flat(3, [1, 2, 3, 0, 4, 5, 6, 7, 8])
    assert not MoveRules.is_adjacent(grid, 3)


def test_is_adjacent_fails_closed_on_missing_labels() -> None:
    grid = Grid.from_flat(3, [1, 1, 3, 4, 5, 6, 7, 8, 0])
    assert not MoveRules.is_adjacent(grid, 2)
    no_blank = Grid.from_flat(2, [1, 2, 3, 3])
    assert not MoveRules.is_adjacent(no_blank, 3)


def test_locate_delegates_to_grid() -> None:
    grid = Grid.from_flat(3, SOLVED_3)
    assert MoveRules.locate(grid, 4) == Position(1, 0)
    assert MoveRules.locate(grid, 9) is None


# -- apply_move ---------------------------------------------------------------


def test_scenario_move_then_illegal_move() -> None:
    grid = Grid.from_flat(3, SOLVED_3)

    assert MoveRules.apply_move(grid, 6)
    assert grid.flat() == [1, 2, 3, 4, 5, 0, 7, 8, 6]
    assert not grid.is_solved()

    assert not MoveRules.apply_move(grid, 8)
    assert grid.flat() == [1, 2, 3, 4, 5, 0, 7, 8, 6]


def test_blank_is_never_a_move_target() -> None:
    grid = Grid.from_flat(3, SOLVED_3)
    assert not MoveRules.apply_move(grid, 0)
    assert grid.flat() == SOLVED_3


def test_move_of_absent_label_fails() -> None:
    grid = Grid.from_flat(3, SOLVED_3)
    assert not MoveRules.apply_move(grid, 12)
    assert grid.flat() == SOLVED_3


def test_illegal_moves_never_mutate() -> None:
    grid = GameGenerator.generate(5, 400, random.Random(11))
    for label in range(25):
        if MoveRules.is_adjacent(grid, label):
            continue
        before = grid.copy()
        assert not MoveRules.apply_move(grid, label)
        assert grid == before


def test_legal_moves_swap_with_blank() -> None:
    grid = GameGenerator.generate(5, 400, random.Random(12))
    for label in range(1, 25):
        if not MoveRules.is_adjacent(grid, label):
            continue
        trial = grid.copy()
        old_label_pos = trial.locate(label)
        old_blank_pos = trial.locate(0)
        assert MoveRules.apply_move(trial, label)
        assert trial.get_tile(*old_label_pos) == 0
        assert trial.get_tile(*old_blank_pos) == label


# -- directions ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (Direction.UP, 8),      # tile below the blank at (2, 1)
        (Direction.DOWN, 2),    # tile above
        (Direction.LEFT, 6),    # tile to the right
        (Direction.RIGHT, 4),   # tile to the left
    ],
)
def test_tile_in_direction(direction: Direction, expected: int) -> None:
    grid = Grid.from_flat(3, [1, 2, 3, 4, 0, 6, 7, 8, 5])
    assert MoveRules.tile_in_direction(grid, direction) == expected


def test_tile_in_direction_at_edge() -> None:
    grid = Grid.from_flat(3, SOLVED_3)
    assert MoveRules.tile_in_direction(grid, Direction.UP) is None
    assert MoveRules.tile_in_direction(grid, Direction.LEFT) is None
    assert MoveRules.tile_in_direction(grid, Direction.DOWN) == 6
    assert MoveRules.tile_in_direction(grid, Direction.RIGHT) == 8

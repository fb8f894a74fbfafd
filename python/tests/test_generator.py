"""Generator tests: canonical layout and the random blank walk."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamevalidator import Validator
from backend.models.grid import Grid


class _NoRandom(random.Random):
    """A random source that fails the test if it is ever consulted."""

    def choice(self, seq):  # type: ignore[override]
        raise AssertionError("random source should not be used")


# -- solved -------------------------------------------------------------------


def test_solved_layout() -> None:
    assert GameGenerator.solved(3).flat() == [1, 2, 3, 4, 5, 6, 7, 8, 0]
    assert GameGenerator.solved(1).flat() == [0]


def test_solved_rejects_empty_size() -> None:
    with pytest.raises(ValueError):
        GameGenerator.solved(0)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 9])
def test_solved_grid_is_valid(size: int) -> None:
    assert Validator.validate(GameGenerator.solved(size)).ok


# -- scramble -----------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 9])
@pytest.mark.parametrize("steps", [0, 1, 7, 1000])
def test_scramble_preserves_bijection(size: int, steps: int) -> None:
    grid = GameGenerator.solved(size)
    GameGenerator.scramble(grid, steps, random.Random(size * 1000 + steps))
    assert Validator.validate(grid).ok


def test_zero_steps_leaves_grid_solved() -> None:
    grid = GameGenerator.solved(4)
    GameGenerator.scramble(grid, 0, _NoRandom())
    assert grid.is_solved()


def test_single_cell_scramble_is_noop() -> None:
    grid = GameGenerator.solved(1)
    GameGenerator.scramble(grid, 50, _NoRandom())
    assert grid.flat() == [0]


def test_scramble_without_blank_is_noop() -> None:
    grid = Grid.from_flat(2, [1, 2, 3, 3])
    GameGenerator.scramble(grid, 10, _NoRandom())
    assert grid.flat() == [1, 2, 3, 3]


def test_scramble_rejects_negative_steps() -> None:
    with pytest.raises(ValueError):
        GameGenerator.scramble(GameGenerator.solved(3), -1)


def test_single_step_swaps_blank_with_a_neighbour() -> None:
    grid = GameGenerator.solved(4)
    before = grid.flat()
    GameGenerator.scramble(grid, 1, random.Random(3))
    after = grid.flat()

    changed = [i for i in range(len(before)) if before[i] != after[i]]
    assert len(changed) == 2
    assert before[changed[1]] == 0 and after[changed[0]] == 0
    # The blank started bottom-right, so it can only have moved up or left.
    assert changed[0] in (11, 14)


def test_seeded_scramble_is_reproducible() -> None:
    a = GameGenerator.generate(5, 300, random.Random(42))
    b = GameGenerator.generate(5, 300, random.Random(42))
    assert a == b


def test_default_scramble_shuffles_large_board() -> None:
    grid = GameGenerator.generate(9, rng=random.Random(0))
    assert not grid.is_solved()
    assert Validator.validate(grid).ok

"""Grid model for the sliding puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

BLANK = 0


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Position(NamedTuple):
    row: int
    col: int


@dataclass
class Grid:
    """An N×N arrangement of tile labels. 0 represents the blank.

    The grid does not enforce that its labels form a permutation of
    ``0..N²-1``; that is checked explicitly by the validator so that a
    corrupt board can be inspected instead of refused at construction.
    """

    size: int
    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Grid:
        """Create a grid from a flat row-major label list.

        Example::

            Grid.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 8, 0])
        """
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        tiles = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        return cls(size=size, tiles=tiles)

    # -- queries --------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def flat(self) -> list[int]:
        """Return the labels in row-major order."""
        return [v for row in self.tiles for v in row]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def locate(self, label: int) -> Position | None:
        """Return the position holding *label*, or ``None`` if it is absent.

        Plain linear scan; boards are small and lookups happen once per
        user action.
        """
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == label:
                    return Position(r, c)
        return None

    def blank_pos(self) -> Position | None:
        return self.locate(BLANK)

    def is_solved(self) -> bool:
        """Check the row-major sequence is exactly ``1, 2, …, N²-1, 0``."""
        flat = self.flat()
        last = len(flat) - 1
        for i, v in enumerate(flat):
            expected = BLANK if i == last else i + 1
            if v != expected:
                return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == BLANK:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def copy(self) -> Grid:
        return Grid(size=self.size, tiles=[row[:] for row in self.tiles])

    # -- mutation -------------------------------------------------------------

    def swap(self, a: Position, b: Position) -> None:
        """Exchange the labels held at *a* and *b*. No legality checks."""
        (ar, ac), (br, bc) = a, b
        self.tiles[ar][ac], self.tiles[br][bc] = (
            self.tiles[br][bc],
            self.tiles[ar][ac],
        )

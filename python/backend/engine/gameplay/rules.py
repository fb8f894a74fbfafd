"""Move legality and tile movement."""

from __future__ import annotations

from backend.models.grid import BLANK, Direction, Grid, Position

# Offset from the blank to the tile that slides in each direction.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class MoveRules:
    """Stateless rules; every method only touches the grid it is given."""

    @staticmethod
    def locate(grid: Grid, label: int) -> Position | None:
        return grid.locate(label)

    @staticmethod
    def is_adjacent(grid: Grid, label: int) -> bool:
        """True iff *label* sits one orthogonal step from the blank."""
        blank = grid.locate(BLANK)
        pos = grid.locate(label)
        if blank is None or pos is None:
            return False
        return abs(blank.row - pos.row) + abs(blank.col - pos.col) == 1

    @staticmethod
    def apply_move(grid: Grid, label: int) -> bool:
        """Slide *label* into the blank.

        Returns False and leaves *grid* untouched when *label* is the
        blank itself or is not adjacent to it.
        """
        if label == BLANK or not MoveRules.is_adjacent(grid, label):
            return False
        grid.swap(grid.locate(BLANK), grid.locate(label))
        return True

    @staticmethod
    def tile_in_direction(grid: Grid, direction: Direction) -> int | None:
        """Return the label that would slide in *direction*, or ``None`` at an edge."""
        blank = grid.locate(BLANK)
        if blank is None:
            return None
        dr, dc = _OFFSETS[direction]
        tr, tc = blank.row + dr, blank.col + dc
        if not grid.in_bounds(tr, tc):
            return None
        return grid.get_tile(tr, tc)

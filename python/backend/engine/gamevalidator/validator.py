"""Board-integrity validation."""

from __future__ import annotations

import logging
from collections import Counter

from backend.models.grid import Grid
from backend.models.validation import ValidationResult

logger = logging.getLogger(__name__)


class Validator:
    """Checks that a grid holds every label ``0..N²-1`` exactly once."""

    @staticmethod
    def validate(grid: Grid) -> ValidationResult:
        counts = Counter(grid.flat())
        expected = range(grid.cell_count)

        duplicates = {
            label: n for label, n in sorted(counts.items()) if n > 1
        }
        missing = [label for label in expected if label not in counts]
        unexpected = sorted(label for label in counts if label not in expected)

        result = ValidationResult(
            duplicates=duplicates, missing=missing, unexpected=unexpected
        )
        if not result.ok:
            logger.warning("Corrupt %dx%d grid: %s", grid.size, grid.size, result.describe())
        return result

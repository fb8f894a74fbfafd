from backend.models.grid import BLANK, Direction, Grid, Position
from backend.models.validation import ValidationResult

__all__ = ["BLANK", "Direction", "Grid", "Position", "ValidationResult"]

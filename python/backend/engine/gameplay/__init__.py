from backend.engine.gameplay.game import GamePlay, MoveOutcome, MoveStatus
from backend.engine.gameplay.rules import MoveRules

__all__ = ["GamePlay", "MoveOutcome", "MoveRules", "MoveStatus"]

from backend.engine.gamegenerator.generator import DEFAULT_SCRAMBLE_STEPS, GameGenerator

__all__ = ["DEFAULT_SCRAMBLE_STEPS", "GameGenerator"]

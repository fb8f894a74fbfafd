from backend.engine.gamevalidator.validator import Validator

__all__ = ["Validator"]

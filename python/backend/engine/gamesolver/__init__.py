from backend.engine.gamesolver.solver import DEFAULT_MAX_STATES, SearchLimitExceeded, Solver

__all__ = ["DEFAULT_MAX_STATES", "SearchLimitExceeded", "Solver"]

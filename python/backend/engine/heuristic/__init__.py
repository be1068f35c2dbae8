from backend.engine.heuristic.heuristic import estimate

__all__ = ["estimate"]

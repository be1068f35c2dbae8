from backend.engine.moves.generator import MoveGenerator

__all__ = ["MoveGenerator"]

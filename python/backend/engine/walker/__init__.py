from backend.engine.walker.walk import RandomWalker, WalkStep

__all__ = ["RandomWalker", "WalkStep"]

from backend.engine.frontier.frontier import (
    BestFirstFrontier,
    FifoFrontier,
    FiloFrontier,
    Frontier,
    NodeArena,
    SearchNode,
)

__all__ = [
    "BestFirstFrontier",
    "FifoFrontier",
    "FiloFrontier",
    "Frontier",
    "NodeArena",
    "SearchNode",
]

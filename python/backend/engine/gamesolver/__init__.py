from backend.engine.gamesolver.config import SearchConfig
from backend.engine.gamesolver.result import (
    NO_SOLUTION,
    Algorithm,
    PathSink,
    SearchResult,
)
from backend.engine.gamesolver.solver import (
    Solver,
    a_star_search,
    breadth_first_search,
    depth_first_search,
    depth_limited_search,
    iterative_deepening_search,
)

__all__ = [
    "NO_SOLUTION",
    "Algorithm",
    "PathSink",
    "SearchConfig",
    "SearchResult",
    "Solver",
    "a_star_search",
    "breadth_first_search",
    "depth_first_search",
    "depth_limited_search",
    "iterative_deepening_search",
]

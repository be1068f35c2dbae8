"""Search outcomes and the path sink protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from backend.models.board import Board, Move

NO_SOLUTION = -1


class Algorithm(StrEnum):
    BFS = "bfs"
    DFS = "dfs"
    DLS = "dls"
    IDS = "ids"
    ASTAR = "astar"


class PathSink(Protocol):
    """Receives the solution path when a search succeeds."""

    def on_solution(self, moves: list[Move], board: Board) -> None: ...


@dataclass
class SearchResult:
    """Outcome of one search invocation.

    ``cost`` is the number of moves on the solution path, or
    ``NO_SOLUTION`` when the explored space holds no solution.
    ``rounds`` is only set by iterative deepening.
    """

    algorithm: Algorithm
    cost: int = NO_SOLUTION
    moves: list[Move] = field(default_factory=list)
    final_board: Board | None = None
    nodes_expanded: int = 0
    states_seen: int = 0
    rounds: int = 0

    @property
    def solved(self) -> bool:
        return self.cost != NO_SOLUTION

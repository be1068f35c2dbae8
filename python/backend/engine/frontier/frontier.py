"""Search nodes and the frontier disciplines that order them.

Nodes live in a ``NodeArena`` and are addressed by index.  Frontiers only
hold indices, and a node's parent is the index of the node it was
expanded from, so the solution path is rebuilt by walking indices back
to the root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from backend.engine.heuristic import estimate
from backend.models.board import Board, Move


@dataclass(frozen=True)
class SearchNode:
    board: Board
    path_cost: int
    # (parent index, move that produced this node); None for the root.
    step: tuple[int, Move] | None = None


class NodeArena:
    """Append-only store of every node created during one search."""

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def add(self, node: SearchNode) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def path_to(self, index: int) -> list[Move]:
        """Moves from the root to node *index*, in playing order."""
        moves: list[Move] = []
        node = self._nodes[index]
        while node.step is not None:
            parent, move = node.step
            moves.append(move)
            node = self._nodes[parent]
        moves.reverse()
        return moves


# -- disciplines --------------------------------------------------------------


class Frontier(ABC):
    """Pending node indices, removed in discipline order."""

    @abstractmethod
    def push(self, index: int) -> None: ...

    @abstractmethod
    def pop(self) -> int:
        """Remove and return the next index; ``IndexError`` when empty."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0


class FifoFrontier(Frontier):
    """Breadth-first: oldest node first."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, index: int) -> None:
        self._queue.append(index)

    def pop(self) -> int:
        if not self._queue:
            raise IndexError("pop from an empty frontier")
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class FiloFrontier(Frontier):
    """Depth-first: newest node first."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def push(self, index: int) -> None:
        self._stack.append(index)

    def pop(self) -> int:
        if not self._stack:
            raise IndexError("pop from an empty frontier")
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


class BestFirstFrontier(Frontier):
    """A*: node with the lowest ``path_cost + estimate(board)`` first.

    Entries keep insertion order and every ``pop`` scans all of them;
    ties go to the earliest entry.  The chosen entry is removed by its
    position, so two nodes holding equal boards are never confused.
    """

    def __init__(
        self,
        arena: NodeArena,
        heuristic: Callable[[Board], int] = estimate,
    ) -> None:
        self._arena = arena
        self._heuristic = heuristic
        self._entries: list[tuple[int, int]] = []  # (f score, node index)

    def push(self, index: int) -> None:
        node = self._arena[index]
        self._entries.append((node.path_cost + self._heuristic(node.board), index))

    def pop(self) -> int:
        if not self._entries:
            raise IndexError("pop from an empty frontier")
        best = 0
        for pos in range(1, len(self._entries)):
            if self._entries[pos][0] < self._entries[best][0]:
                best = pos
        return self._entries.pop(best)[1]

    def __len__(self) -> int:
        return len(self._entries)

"""Sliding brick puzzle search drivers.

Every driver runs the same expand/test/enqueue loop and differs only in
the frontier discipline, how a revisited state is treated and whether
expansion stops at a depth limit:

  - breadth-first: FIFO frontier, a visited state is never re-entered.
  - depth-first: FILO frontier, a visited state is re-entered only when
    reached by a strictly cheaper path.
  - depth-limited: depth-first that does not expand nodes at the limit.
  - iterative deepening: depth-limited rounds with limits 1, 2, 3, ...
  - A*: best-first frontier on ``path_cost + estimate``, otherwise
    breadth-first.

Successors are normalized before the goal test and the visited-state
lookup, so reported moves refer to the labels of the normalized parent.
``MoveGenerator.replay`` re-executes such a path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from backend.engine.closedset import VisitedStateTable
from backend.engine.frontier import (
    BestFirstFrontier,
    FifoFrontier,
    FiloFrontier,
    Frontier,
    NodeArena,
    SearchNode,
)
from backend.engine.gamesolver.config import SearchConfig
from backend.engine.gamesolver.result import (
    NO_SOLUTION,
    Algorithm,
    PathSink,
    SearchResult,
)
from backend.engine.moves import MoveGenerator
from backend.engine.normalizer import normalize
from backend.models.board import Board, Move

logger = logging.getLogger(__name__)


@dataclass
class _Outcome:
    cost: int = NO_SOLUTION
    moves: list[Move] = field(default_factory=list)
    final_board: Board | None = None
    expanded: int = 0
    cutoff: bool = False


def _search(
    board: Board,
    frontier: Frontier,
    arena: NodeArena,
    table: VisitedStateTable,
    *,
    revisit_cheaper: bool,
    max_depth: int | None = None,
) -> _Outcome:
    """Run one search from *board* until solved or the frontier drains.

    ``cutoff`` in the outcome records whether any node was left
    unexpanded because of *max_depth*.
    """
    table.reset()
    outcome = _Outcome()

    root = arena.add(SearchNode(board=board.clone(), path_cost=0))
    frontier.push(root)
    table.insert(table.key_for(normalize(board)), 0)

    while frontier:
        index = frontier.pop()
        node = arena[index]

        if max_depth is not None and node.path_cost >= max_depth:
            outcome.cutoff = True
            continue

        outcome.expanded += 1
        cost = node.path_cost + 1

        for move in MoveGenerator.all_legal_moves(node.board):
            child = normalize(MoveGenerator.apply(node.board, move))

            if child.is_solved():
                outcome.cost = cost
                outcome.moves = arena.path_to(index) + [move]
                outcome.final_board = child
                return outcome

            key = table.key_for(child)
            seen = table.lookup(key)
            if seen is None:
                table.insert(key, cost)
            elif revisit_cheaper and cost < seen:
                table.update(key, cost)
            else:
                continue

            frontier.push(arena.add(SearchNode(child, cost, (index, move))))

    return outcome


def _finish(
    result: SearchResult,
    outcome: _Outcome,
    table: VisitedStateTable,
    sink: PathSink | None,
) -> SearchResult:
    result.cost = outcome.cost
    result.moves = outcome.moves
    result.final_board = outcome.final_board
    result.states_seen = len(table)
    if outcome.final_board is not None and sink is not None:
        sink.on_solution(outcome.moves, outcome.final_board)
    logger.info(
        "%s finished: cost=%d expanded=%d states=%d",
        result.algorithm.value,
        result.cost,
        result.nodes_expanded,
        result.states_seen,
    )
    return result


def _already_solved(
    algorithm: Algorithm, board: Board, sink: PathSink | None
) -> SearchResult:
    logger.info("%s: start board is already solved", algorithm.value)
    result = SearchResult(algorithm=algorithm, cost=0, final_board=board.clone())
    if sink is not None:
        sink.on_solution([], result.final_board)
    return result


def _drive(
    algorithm: Algorithm,
    board: Board,
    make_frontier: Callable[[NodeArena], Frontier],
    *,
    revisit_cheaper: bool,
    max_depth: int | None,
    config: SearchConfig | None,
    sink: PathSink | None,
) -> SearchResult:
    if board.is_solved():
        return _already_solved(algorithm, board, sink)

    config = config or SearchConfig()
    logger.info("%s started on a %dx%d board", algorithm.value, board.width, board.height)

    arena = NodeArena()
    table = VisitedStateTable(border=config.key_border)
    outcome = _search(
        board,
        make_frontier(arena),
        arena,
        table,
        revisit_cheaper=revisit_cheaper,
        max_depth=max_depth,
    )
    result = SearchResult(algorithm=algorithm, nodes_expanded=outcome.expanded)
    return _finish(result, outcome, table, sink)


# -- public drivers -----------------------------------------------------------


def breadth_first_search(
    board: Board,
    config: SearchConfig | None = None,
    sink: PathSink | None = None,
) -> SearchResult:
    """Shortest solution by number of moves."""
    return _drive(
        Algorithm.BFS,
        board,
        lambda arena: FifoFrontier(),
        revisit_cheaper=False,
        max_depth=None,
        config=config,
        sink=sink,
    )


def depth_first_search(
    board: Board,
    config: SearchConfig | None = None,
    sink: PathSink | None = None,
) -> SearchResult:
    """Unbounded depth-first search; the solution need not be shortest."""
    return _drive(
        Algorithm.DFS,
        board,
        lambda arena: FiloFrontier(),
        revisit_cheaper=True,
        max_depth=None,
        config=config,
        sink=sink,
    )


def depth_limited_search(
    board: Board,
    max_depth: int,
    config: SearchConfig | None = None,
    sink: PathSink | None = None,
) -> SearchResult:
    """Depth-first search that never expands a node at *max_depth* or deeper."""
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    return _drive(
        Algorithm.DLS,
        board,
        lambda arena: FiloFrontier(),
        revisit_cheaper=True,
        max_depth=max_depth,
        config=config,
        sink=sink,
    )


def iterative_deepening_search(
    board: Board,
    config: SearchConfig | None = None,
    sink: PathSink | None = None,
) -> SearchResult:
    """Depth-limited rounds with growing limits until one succeeds.

    The reported cost is the depth of the successful round.  A round that
    fails without cutting anything off at its limit has explored the whole
    state space, so deepening stops there with no solution.
    """
    algorithm = Algorithm.IDS
    if board.is_solved():
        return _already_solved(algorithm, board, sink)

    config = config or SearchConfig()
    logger.info("%s started on a %dx%d board", algorithm.value, board.width, board.height)

    table = VisitedStateTable(border=config.key_border)
    result = SearchResult(algorithm=algorithm)
    depth = 0
    while config.deepening_limit is None or depth < config.deepening_limit:
        depth += 1
        arena = NodeArena()
        outcome = _search(
            board,
            FiloFrontier(),
            arena,
            table,
            revisit_cheaper=True,
            max_depth=depth,
        )
        result.nodes_expanded += outcome.expanded
        result.rounds = depth
        logger.debug(
            "ids round %d: expanded=%d states=%d", depth, outcome.expanded, len(table)
        )
        if outcome.cost != NO_SOLUTION:
            outcome.cost = depth
            break
        if not outcome.cutoff:
            logger.debug("ids round %d exhausted the state space", depth)
            break

    return _finish(result, outcome, table, sink)


def a_star_search(
    board: Board,
    config: SearchConfig | None = None,
    sink: PathSink | None = None,
) -> SearchResult:
    """Best-first search on ``path_cost + estimate(board)``."""
    return _drive(
        Algorithm.ASTAR,
        board,
        BestFirstFrontier,
        revisit_cheaper=False,
        max_depth=None,
        config=config,
        sink=sink,
    )


# -- facade -------------------------------------------------------------------


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        algorithm: Algorithm = Algorithm.BFS,
        *,
        max_depth: int | None = None,
        config: SearchConfig | None = None,
        sink: PathSink | None = None,
    ) -> SearchResult:
        """Run *algorithm* on *board*.

        ``max_depth`` is required for ``Algorithm.DLS`` and ignored
        otherwise.
        """
        if algorithm is Algorithm.DLS:
            if max_depth is None:
                raise ValueError("Depth-limited search needs max_depth.")
            return depth_limited_search(board, max_depth, config, sink)

        drivers = {
            Algorithm.BFS: breadth_first_search,
            Algorithm.DFS: depth_first_search,
            Algorithm.IDS: iterative_deepening_search,
            Algorithm.ASTAR: a_star_search,
        }
        return drivers[algorithm](board, config, sink)

    @staticmethod
    def hint(board: Board, config: SearchConfig | None = None) -> Move | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        result = breadth_first_search(board, config)
        return result.moves[0] if result.solved else None

"""Vanilla terminal frontend — no third-party dependencies.

Prints boards, moves and run summaries in the plain level-file text
format, so the output of a run can be diffed or fed back as a level.
"""

from __future__ import annotations

import random

from backend.engine.gamesolver import Algorithm, SearchConfig, SearchResult, Solver
from backend.engine.timing import RunTimer
from backend.engine.walker import RandomWalker
from backend.models.board import Board, Move
from backend.models.puzzle_file import dump_moves, dumps


# -- ANSI helpers -------------------------------------------------------------

_C = "\033[36;1m"    # bold cyan
_Y = "\033[33;1m"    # bold yellow
_R = "\033[0m"       # reset

_TITLES = {
    Algorithm.BFS: "Breadth First Search",
    Algorithm.DFS: "Depth First Search",
    Algorithm.DLS: "Depth Limited Search",
    Algorithm.IDS: "Iterative Deepening Search",
    Algorithm.ASTAR: "A* Search",
}


class _PrintingSink:
    """Prints the solution path, then the solved board."""

    def on_solution(self, moves: list[Move], board: Board) -> None:
        print(dump_moves(moves), end="")
        print(dumps(board), end="")


def _summary_line(result: SearchResult, timer: RunTimer) -> str:
    """``<states> (<S> seconds and <M>/1000) <cost>``."""
    return f"{result.states_seen} {timer.format_elapsed()} {result.cost}"


# -- public entry points ------------------------------------------------------


def run(
    board: Board,
    algorithms: list[Algorithm],
    *,
    max_depth: int | None = None,
    config: SearchConfig | None = None,
) -> list[SearchResult]:
    """Solve *board* with each algorithm in turn and print the outcome."""
    sink = _PrintingSink()
    results: list[SearchResult] = []

    for algorithm in algorithms:
        print(f"{_C}=== {_TITLES[algorithm]} ==={_R}")
        print(dumps(board), end="")
        with RunTimer() as timer:
            result = Solver.solve(
                board, algorithm, max_depth=max_depth, config=config, sink=sink
            )
        if not result.solved:
            print(f"{_Y}No solution found.{_R}")
        print(_summary_line(result, timer))
        print()
        results.append(result)

    return results


def run_walk(board: Board, steps: int, rng: random.Random | None = None) -> None:
    """Print a random walk: the start board, then each move and board."""
    start, history = RandomWalker.walk(board, steps, rng)
    print(f"{_C}=== Random Walk ({steps} steps) ==={_R}")
    print(dumps(start), end="")
    for step in history:
        print(step.move)
        print()
        print(dumps(step.board), end="")
    if history and history[-1].board.is_solved():
        print(f"{_Y}Goal reached after {len(history)} moves.{_R}")

"""Solver test suite — every search driver against shared level fixtures.

Levels are JSON fixtures under ``<project_root>/fixtures/``; each solvable
level carries its hand-checked minimum solution cost.  Every test is
hard-killed by ``pytest-timeout`` (configured in ``pyproject.toml``).
Whenever a driver reports a path, the moves are replayed through the
move generator to verify they really reach a solved board.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.engine.gamesolver import (
    NO_SOLUTION,
    Algorithm,
    SearchConfig,
    Solver,
    a_star_search,
    breadth_first_search,
    depth_first_search,
    depth_limited_search,
    iterative_deepening_search,
)
from backend.engine.moves import MoveGenerator
from backend.models.board import Board, Direction, Move

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> dict[str, list[dict]]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(level: dict) -> str:
    return level["id"]


_LEVELS = _load("levels.json")
_SOLVABLE = _LEVELS["solvable"]
_UNSOLVABLE = _LEVELS["unsolvable"]

# Levels with 1×2 / 2×1 blocks whose depth-first order finds a state deep
# before finding it shallow.
_REENTRY = [lv for lv in _SOLVABLE if lv["id"].startswith("bars-")]

# Levels whose A* run was traced by hand and lands on the optimum.
_ASTAR_OPTIMAL = {"primary-abuts-goal", "corridor-walk", "move-blocker"}


# -- helpers ------------------------------------------------------------------


def _board(level: dict) -> Board:
    return Board.from_rows(level["rows"])


class _RecordingSink:
    def __init__(self) -> None:
        self.calls: list[tuple[list[Move], Board]] = []

    def on_solution(self, moves: list[Move], board: Board) -> None:
        self.calls.append((list(moves), board))


def _assert_path(level: dict, result) -> None:
    """The reported moves must replay to the reported solved board."""
    board = _board(level)
    assert result.solved, f"{result.algorithm} found no solution ({level['id']})"
    assert len(result.moves) == result.cost, (
        f"{len(result.moves)} moves reported for cost {result.cost} ({level['id']})"
    )
    boards = MoveGenerator.replay(board, result.moves)
    assert boards[-1].is_solved(), f"Replayed path does not solve {level['id']}"
    assert boards[-1].equals(result.final_board)
    assert all(not b.is_solved() for b in boards[:-1]), (
        "Path passes through a solved board before its end"
    )


# -- breadth-first ------------------------------------------------------------


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
def test_bfs_finds_minimum_cost(level: dict) -> None:
    result = breadth_first_search(_board(level))
    assert result.cost == level["cost"]
    _assert_path(level, result)


def test_bfs_primary_abutting_goal() -> None:
    board = Board.from_rows([[1, 1, 1], [2, 2, -1]])
    result = breadth_first_search(board)
    assert result.cost == 1
    assert result.moves == [Move(2, Direction.RIGHT)]
    assert result.final_board.cells == [[1, 1, 1], [0, 2, 2]]


def test_bfs_does_not_touch_input_board() -> None:
    board = Board.from_rows(_SOLVABLE[2]["rows"])
    before = board.clone()
    breadth_first_search(board)
    assert board.equals(before)


def test_bfs_counts_interchangeable_blocks_once() -> None:
    # Two 1×1 blocks in a 2×2 pocket; the primary is sealed in.  Six
    # placements of two indistinguishable blocks exist, twelve if the
    # labels told them apart.
    board = Board.from_rows([[3, 0, 1, 2, 1], [0, 4, 1, 1, -1]])
    result = breadth_first_search(board)
    assert result.cost == NO_SOLUTION
    assert result.states_seen == 6


# -- depth-first --------------------------------------------------------------


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
def test_dfs_is_never_cheaper_than_bfs(level: dict) -> None:
    result = depth_first_search(_board(level))
    assert result.cost >= level["cost"]
    _assert_path(level, result)


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
def test_dls_at_minimum_depth_succeeds(level: dict) -> None:
    result = depth_limited_search(_board(level), level["cost"])
    assert result.cost == level["cost"]
    _assert_path(level, result)


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
def test_dls_below_minimum_depth_fails(level: dict) -> None:
    result = depth_limited_search(_board(level), level["cost"] - 1)
    assert result.cost == NO_SOLUTION
    assert result.moves == []


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
def test_dls_zero_depth_never_expands_root(level: dict) -> None:
    result = depth_limited_search(_board(level), 0)
    assert result.cost == NO_SOLUTION
    assert result.nodes_expanded == 0


@pytest.mark.parametrize("level", _REENTRY, ids=_ids)
def test_depth_first_reopens_states_reached_by_a_shorter_path(level: dict) -> None:
    # Depth-first order reaches some states first along a long detour.  The
    # shortest solution runs through them, so the limited searches only
    # match breadth-first when such states are expanded again at the
    # lower cost.
    board = _board(level)
    shortest = breadth_first_search(board).cost
    assert shortest == level["cost"]

    limited = depth_limited_search(board, shortest)
    assert limited.cost == shortest
    _assert_path(level, limited)

    deepening = iterative_deepening_search(board)
    assert deepening.cost == shortest
    assert deepening.rounds == shortest
    _assert_path(level, deepening)


def test_dls_rejects_negative_depth() -> None:
    with pytest.raises(ValueError):
        depth_limited_search(_board(_SOLVABLE[0]), -1)


# -- iterative deepening ------------------------------------------------------


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
def test_ids_depth_matches_bfs_cost(level: dict) -> None:
    result = iterative_deepening_search(_board(level))
    assert result.cost == level["cost"]
    assert result.rounds == level["cost"]
    _assert_path(level, result)


def test_ids_stops_at_deepening_limit() -> None:
    level = _SOLVABLE[3]
    result = iterative_deepening_search(
        _board(level), SearchConfig(deepening_limit=level["cost"] - 1)
    )
    assert result.cost == NO_SOLUTION
    assert result.rounds == level["cost"] - 1


# -- A* -----------------------------------------------------------------------


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
def test_astar_solves(level: dict) -> None:
    result = a_star_search(_board(level))
    assert result.cost >= level["cost"]
    if level["id"] in _ASTAR_OPTIMAL:
        assert result.cost == level["cost"]
    _assert_path(level, result)


# -- shared behaviour ---------------------------------------------------------


@pytest.mark.parametrize("level", _SOLVABLE, ids=_ids)
@pytest.mark.parametrize("algorithm", [Algorithm.BFS, Algorithm.IDS])
def test_interior_keys_give_same_cost(level: dict, algorithm: Algorithm) -> None:
    config = SearchConfig(key_border=1)
    result = Solver.solve(_board(level), algorithm, config=config)
    assert result.cost == level["cost"]


@pytest.mark.parametrize("level", _UNSOLVABLE, ids=_ids)
@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_unsolvable_reports_no_solution(level: dict, algorithm: Algorithm) -> None:
    result = Solver.solve(_board(level), algorithm, max_depth=10)
    assert not result.solved
    assert result.cost == NO_SOLUTION
    assert result.final_board is None


def test_ids_stops_once_space_is_exhausted() -> None:
    shuttle = next(lv for lv in _UNSOLVABLE if lv["id"] == "shuttle")
    result = iterative_deepening_search(_board(shuttle))
    assert result.cost == NO_SOLUTION
    assert result.rounds == 2


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_solved_board_costs_nothing(algorithm: Algorithm) -> None:
    board = Board.from_rows([[1, 1, 1], [0, 2, 2]])
    sink = _RecordingSink()
    result = Solver.solve(board, algorithm, max_depth=0, sink=sink)
    assert result.cost == 0
    assert result.moves == []
    assert result.nodes_expanded == 0
    assert sink.calls and sink.calls[0][0] == []


def test_sink_receives_path_once() -> None:
    level = _SOLVABLE[3]
    sink = _RecordingSink()
    result = iterative_deepening_search(_board(level), sink=sink)
    assert len(sink.calls) == 1
    moves, board = sink.calls[0]
    assert moves == result.moves
    assert board.equals(result.final_board)


def test_sink_not_called_without_solution() -> None:
    sink = _RecordingSink()
    breadth_first_search(_board(_UNSOLVABLE[0]), sink=sink)
    assert sink.calls == []


# -- facade -------------------------------------------------------------------


def test_solve_dispatches_by_algorithm() -> None:
    board = _board(_SOLVABLE[1])
    for algorithm in Algorithm:
        result = Solver.solve(board, algorithm, max_depth=10)
        assert result.algorithm is algorithm
        assert result.solved


def test_solve_dls_requires_depth() -> None:
    with pytest.raises(ValueError):
        Solver.solve(_board(_SOLVABLE[0]), Algorithm.DLS)


def test_hint_is_first_move_of_shortest_path() -> None:
    board = Board.from_rows(
        [[1, 1, 1, 1], [1, 2, 0, 1], [1, 3, 0, 1], [1, -1, 1, 1]]
    )
    assert Solver.hint(board) == Move(3, Direction.RIGHT)


def test_hint_none_when_solved_or_stuck() -> None:
    assert Solver.hint(Board.from_rows([[2, 0]])) is None
    assert Solver.hint(_board(_UNSOLVABLE[0])) is None

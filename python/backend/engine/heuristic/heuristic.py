"""Distance estimate used by the best-first search."""

from __future__ import annotations

from backend.models.board import GOAL, PRIMARY, Board


def _extent(board: Board, label: int) -> tuple[int, int] | None:
    """Largest row and largest column holding *label*, taken independently."""
    max_row = max_col = -1
    for r, row in enumerate(board.cells):
        for c, val in enumerate(row):
            if val == label:
                max_row = max(max_row, r)
                max_col = max(max_col, c)
    if max_row < 0:
        return None
    return max_row, max_col


def estimate(board: Board) -> int:
    """Manhattan distance between the primary block and the goal region.

    Both regions are reduced to their bottom-right extent, which matches a
    real cell only for rectangular regions.  A board without goal cells
    (solved) or without a primary block estimates to ``0``.
    """
    primary = _extent(board, PRIMARY)
    goal = _extent(board, GOAL)
    if primary is None or goal is None:
        return 0
    return abs(goal[0] - primary[0]) + abs(goal[1] - primary[1])

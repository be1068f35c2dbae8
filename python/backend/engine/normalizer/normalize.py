"""Canonical relabeling of interchangeable blocks."""

from __future__ import annotations

from backend.models.board import PRIMARY, Board


def normalize(board: Board) -> Board:
    """Return a copy of *board* with ordinary blocks renumbered.

    Labels up to ``2`` are kept.  Labels from ``3`` up are reassigned
    ``3, 4, 5, ...`` in the order their first cell appears in a row-major
    scan, so two boards that differ only in which number each block
    carries produce the same result.
    """
    remap: dict[int, int] = {}
    cells: list[list[int]] = []
    for row in board.cells:
        new_row: list[int] = []
        for val in row:
            if val > PRIMARY:
                if val not in remap:
                    remap[val] = PRIMARY + 1 + len(remap)
                val = remap[val]
            new_row.append(val)
        cells.append(new_row)
    return Board(height=board.height, width=board.width, cells=cells)

"""Level file loading and text dumps.

A level file holds the board width and height followed by every cell,
row by row, each value terminated by a comma::

    4,3,
    1,1,1,1,
    1,2,0,-1,
    1,1,1,1,

Line breaks are only for readability; the comma is the separator.
"""

from __future__ import annotations

from pathlib import Path

from backend.errors import PuzzleFormatError
from backend.models.board import Board, Move


def parse_board(text: str, source: str | None = None) -> Board:
    """Parse level *text* into a ``Board``."""
    tokens = [t.strip() for t in text.split(",")]
    tokens = [t for t in tokens if t]
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise PuzzleFormatError(f"non-integer value in level ({exc})", source) from exc

    if len(values) < 2:
        raise PuzzleFormatError("missing board dimensions", source)
    width, height, flat = values[0], values[1], values[2:]
    if width <= 0 or height <= 0:
        raise PuzzleFormatError(f"invalid dimensions {width}×{height}", source)
    if len(flat) != width * height:
        raise PuzzleFormatError(
            f"expected {width * height} cells for a {width}×{height} board, "
            f"got {len(flat)}",
            source,
        )
    return Board.from_flat(width, height, flat)


def load_board(path: Path) -> Board:
    """Load a level file from disk."""
    return parse_board(Path(path).read_text(), source=str(path))


def dumps(board: Board) -> str:
    """Render *board* in the level file format (trailing blank line)."""
    lines = [f"{board.width},{board.height},"]
    for row in board.cells:
        lines.append("".join(f"{v}," for v in row))
    return "\n".join(lines) + "\n\n"


def dump_moves(moves: list[Move]) -> str:
    return "".join(f"{m}\n" for m in moves)

"""Board model for the sliding brick puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# Reserved cell labels.  Every label >= 3 is an ordinary movable block.
GOAL = -1
EMPTY = 0
WALL = 1
PRIMARY = 2


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# (row, col) offset of the neighbour a cell moves into.
OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Move:
    """Translate every cell of block ``label`` one step in ``direction``."""

    label: int
    direction: Direction

    def __str__(self) -> str:
        return f"({self.label},{self.direction.value})"


StateKey = tuple[int, ...]


@dataclass
class Board:
    """Represents a sliding brick puzzle configuration.

    Cells are stored as a 2D list of ints, row-major.  ``0`` is empty,
    ``1`` a wall, ``-1`` a goal cell, ``2`` the primary block and every
    label from ``3`` up another movable block.
    """

    height: int
    width: int
    cells: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of equally long rows.

        Example::

            Board.from_rows([[1, 1, 1], [2, 2, -1]])
        """
        if not rows or not rows[0]:
            raise ValueError("A board needs at least one row and one column.")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {width}."
                )
        return cls(height=len(rows), width=width, cells=[list(row) for row in rows])

    @classmethod
    def from_flat(cls, width: int, height: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major cell list."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid board dimensions {width}×{height}.")
        if len(flat) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for a {width}×{height} board, "
                f"got {len(flat)}."
            )
        cells = [list(flat[r * width : (r + 1) * width]) for r in range(height)]
        return cls(height=height, width=width, cells=cells)

    # -- queries --------------------------------------------------------------

    def get(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cells_of(self, label: int) -> list[tuple[int, int]]:
        """Return the (row, col) of every cell holding *label*, row-major."""
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, val in enumerate(row)
            if val == label
        ]

    def block_labels(self) -> list[int]:
        """Return the movable block labels present, ascending."""
        return sorted({val for row in self.cells for val in row if val >= PRIMARY})

    @property
    def max_label(self) -> int:
        return max(val for row in self.cells for val in row)

    def is_solved(self) -> bool:
        """A board is solved once the primary block covers every goal cell."""
        return all(val != GOAL for row in self.cells for val in row)

    def equals(self, other: Board) -> bool:
        """Compare two boards of the same dimensions cell by cell."""
        if (self.height, self.width) != (other.height, other.width):
            raise ValueError(
                f"Cannot compare a {self.width}×{self.height} board with a "
                f"{other.width}×{other.height} board."
            )
        return self.cells == other.cells

    def key(self, border: int = 0) -> StateKey:
        """Row-major encoding of the cells inside a *border*-wide ring."""
        return tuple(
            val
            for row in self.cells[border : self.height - border]
            for val in row[border : self.width - border]
        )

    def clone(self) -> Board:
        return Board(
            height=self.height,
            width=self.width,
            cells=[row[:] for row in self.cells],
        )

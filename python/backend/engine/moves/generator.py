"""Legal move enumeration and move application."""

from __future__ import annotations

from backend.engine.normalizer import normalize
from backend.errors import IllegalMoveError
from backend.models.board import (
    EMPTY,
    GOAL,
    OFFSETS,
    PRIMARY,
    Board,
    Direction,
    Move,
)


class MoveGenerator:
    """Stateless move generator — all methods are static."""

    @staticmethod
    def legal_moves(board: Board, label: int) -> list[Move]:
        """Return the legal moves of block *label*, in direction order.

        A direction is legal only if every cell of the block can step
        into an in-grid neighbour that is empty, part of the block itself,
        or (for the primary block only) a goal cell.
        """
        if label < PRIMARY:
            return []
        cells = board.cells_of(label)
        if not cells:
            return []

        moves: list[Move] = []
        for direction in Direction:
            if all(
                MoveGenerator._can_enter(board, label, r, c, direction)
                for r, c in cells
            ):
                moves.append(Move(label, direction))
        return moves

    @staticmethod
    def all_legal_moves(board: Board) -> list[Move]:
        """Return every legal move on *board*, by ascending block label."""
        moves: list[Move] = []
        for label in board.block_labels():
            moves.extend(MoveGenerator.legal_moves(board, label))
        return moves

    @staticmethod
    def apply(board: Board, move: Move) -> Board:
        """Return a new board with *move* applied.

        Raises ``IllegalMoveError`` if the move is not legal on *board*;
        the input board is never modified.
        """
        cells = board.cells_of(move.label)
        if move.label < PRIMARY or not cells:
            raise IllegalMoveError(f"No movable block {move.label} on the board.")
        for r, c in cells:
            if not MoveGenerator._can_enter(board, move.label, r, c, move.direction):
                raise IllegalMoveError(
                    f"Move {move} is blocked at ({r}, {c})."
                )

        dr, dc = OFFSETS[move.direction]
        result = board.clone()
        for r, c in cells:
            result.cells[r][c] = EMPTY
        for r, c in cells:
            result.cells[r + dr][c + dc] = move.label
        return result

    @staticmethod
    def replay(board: Board, moves: list[Move]) -> list[Board]:
        """Re-execute a reported path from *board*.

        Each move is expressed against the normalized predecessor, so the
        board is normalized after every step.  Returns the boards after
        each move.
        """
        boards: list[Board] = []
        current = board
        for move in moves:
            current = normalize(MoveGenerator.apply(current, move))
            boards.append(current)
        return boards

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _can_enter(
        board: Board, label: int, row: int, col: int, direction: Direction
    ) -> bool:
        dr, dc = OFFSETS[direction]
        nr, nc = row + dr, col + dc
        if not board.in_bounds(nr, nc):
            return False
        target = board.cells[nr][nc]
        if target == EMPTY or target == label:
            return True
        return label == PRIMARY and target == GOAL

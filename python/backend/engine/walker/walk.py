"""Random walks through the puzzle's state space."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.engine.moves import MoveGenerator
from backend.engine.normalizer import normalize
from backend.models.board import Board, Move


@dataclass(frozen=True)
class WalkStep:
    move: Move
    board: Board


class RandomWalker:
    """Plays uniformly random legal moves from a start board."""

    @staticmethod
    def walk(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> tuple[Board, list[WalkStep]]:
        """Take up to *steps* random moves from *board*.

        Returns the normalized start board and one ``WalkStep`` per move.
        The walk ends early once the board is solved or no move is left.
        """
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        rng = rng or random.Random()

        start = normalize(board)
        current = start
        history: list[WalkStep] = []
        while len(history) < steps and not current.is_solved():
            moves = MoveGenerator.all_legal_moves(current)
            if not moves:
                break
            move = rng.choice(moves)
            current = normalize(MoveGenerator.apply(current, move))
            history.append(WalkStep(move=move, board=current))
        return start, history

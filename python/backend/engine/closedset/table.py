"""Visited-state table (the "closed set")."""

from __future__ import annotations

from backend.models.board import Board, StateKey


class VisitedStateTable:
    """Maps a canonical state key to the cheapest path cost seen so far.

    Keys cover the board inside a ring of *border* cells.  Walled levels
    can skip their outer wall with ``border=1``; the default keys every
    cell.
    """

    def __init__(self, border: int = 0) -> None:
        if border < 0:
            raise ValueError(f"border must be non-negative, got {border}")
        self.border = border
        self._costs: dict[StateKey, int] = {}

    def key_for(self, board: Board) -> StateKey:
        return board.key(self.border)

    # -- queries --------------------------------------------------------------

    def lookup(self, key: StateKey) -> int | None:
        return self._costs.get(key)

    def __contains__(self, key: StateKey) -> bool:
        return key in self._costs

    def __len__(self) -> int:
        return len(self._costs)

    # -- mutation -------------------------------------------------------------

    def insert(self, key: StateKey, cost: int) -> None:
        if key in self._costs:
            raise KeyError(f"state already recorded (cost {self._costs[key]})")
        self._costs[key] = cost

    def update(self, key: StateKey, cost: int) -> None:
        if key not in self._costs:
            raise KeyError("cannot update a state that was never recorded")
        self._costs[key] = cost

    def reset(self) -> None:
        self._costs.clear()

"""Exception types raised by the puzzle backend."""

from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for puzzle errors."""


class PuzzleFormatError(PuzzleError):
    """A level file could not be parsed into a board."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        self.reason = reason
        self.source = source
        where = f"{source}: " if source else ""
        super().__init__(f"{where}{reason}")


class IllegalMoveError(PuzzleError):
    """A move was applied to a board on which it is not legal."""

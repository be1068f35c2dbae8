from backend.models.board import (
    EMPTY,
    GOAL,
    PRIMARY,
    WALL,
    Board,
    Direction,
    Move,
    StateKey,
)
from backend.models.puzzle_file import dumps, load_board, parse_board

__all__ = [
    "EMPTY",
    "GOAL",
    "PRIMARY",
    "WALL",
    "Board",
    "Direction",
    "Move",
    "StateKey",
    "dumps",
    "load_board",
    "parse_board",
]

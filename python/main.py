#!/usr/bin/env python3
"""Sliding Brick Puzzle Solver.

Usage::

    python main.py solve levels/SBP-level1.txt              # bfs, dfs, ids
    python main.py solve levels/SBP-level1.txt -a astar -f vanilla
    python main.py solve levels/SBP-level1.txt --all --key-border 1
    python main.py solve levels/SBP-level1.txt -a dls --max-depth 8
    python main.py walk levels/SBP-level0.txt -n 3 --seed 7
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
LEVELS_DIR = PROJECT_ROOT / "levels"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import Algorithm, SearchConfig  # noqa: E402
from backend.errors import PuzzleError  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.puzzle_file import load_board  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}

# Run when no --algorithm is given.
DEFAULT_ALGORITHMS = [Algorithm.BFS, Algorithm.DFS, Algorithm.IDS]

_err = Console(stderr=True)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _load(level: Path) -> Board:
    try:
        return load_board(level)
    except FileNotFoundError:
        _err.print(f"[red]Level file not found:[/red] {level}")
        raise typer.Exit(code=1)
    except PuzzleError as exc:
        _err.print(f"[red]Malformed level:[/red] {exc}")
        raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding Brick Puzzle Solver.")


@app.command()
def solve(
    level: Path = typer.Argument(..., help="Level file to solve."),
    algorithm: Optional[List[Algorithm]] = typer.Option(
        None, "-a", "--algorithm",
        help="Algorithm to run; repeat for several. Default: bfs, dfs, ids.",
    ),
    run_all: bool = typer.Option(
        False, "--all",
        help="Run every algorithm (dls needs --max-depth).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output style.",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth",
        min=0,
        help="Depth limit for depth-limited search.",
    ),
    key_border: int = typer.Option(
        0, "--key-border",
        min=0,
        help="Outer ring width left out of visited-state keys (1 skips the wall).",
    ),
    deepening_limit: Optional[int] = typer.Option(
        None, "--deepening-limit",
        min=1,
        help="Deepest round iterative deepening tries.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve LEVEL with one or more search algorithms."""
    _configure_logging(verbose)

    if run_all:
        algorithms = list(Algorithm)
        if max_depth is None:
            algorithms.remove(Algorithm.DLS)
    else:
        algorithms = algorithm or DEFAULT_ALGORITHMS

    if Algorithm.DLS in algorithms and max_depth is None:
        raise typer.BadParameter(
            "Depth-limited search needs --max-depth.", param_hint="--algorithm"
        )

    board = _load(level)
    config = SearchConfig(key_border=key_border, deepening_limit=deepening_limit)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, algorithms, max_depth=max_depth, config=config)


@app.command()
def walk(
    level: Path = typer.Argument(..., help="Level file to start from."),
    steps: int = typer.Option(
        3, "-n", "--steps",
        min=0,
        help="Number of random moves.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for a reproducible walk.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output style.",
    ),
) -> None:
    """Take random legal moves from LEVEL."""
    _configure_logging(False)
    board = _load(level)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run_walk(board, steps, random.Random(seed))


if __name__ == "__main__":
    app()

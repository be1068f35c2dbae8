"""Rich terminal frontend — coloured boards, panels and summary tables.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Algorithm, SearchConfig, SearchResult, Solver
from backend.engine.timing import RunTimer
from backend.engine.walker import RandomWalker
from backend.models.board import EMPTY, GOAL, PRIMARY, WALL, Board, Move

console = Console()

# Cycled through for ordinary blocks (labels >= 3).
_BLOCK_STYLES = ["cyan", "magenta", "green", "blue", "bright_cyan", "bright_magenta"]


# -- board rendering ----------------------------------------------------------


def _cell(val: int, width: int) -> str:
    if val == EMPTY:
        return f"[dim]{'·':>{width}}[/dim]"
    if val == WALL:
        return f"[grey50]{'█' * width}[/grey50]"
    if val == GOAL:
        return f"[bold red]{'◎':>{width}}[/bold red]"
    if val == PRIMARY:
        return f"[bold yellow]{val:>{width}}[/bold yellow]"
    style = _BLOCK_STYLES[(val - 3) % len(_BLOCK_STYLES)]
    return f"[bold {style}]{val:>{width}}[/bold {style}]"


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max(len(str(board.max_label)), 2)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(board.width):
        table.add_column(width=width, justify="center")
    for row in board.cells:
        table.add_row(*(_cell(val, width) for val in row))
    return table


def _board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(render_board(board)),
        title=f"[bold]{title}[/bold]",
        border_style=style,
        padding=(0, 2),
        expand=False,
    )


class _PanelSink:
    """Shows the move list next to the solved board."""

    def on_solution(self, moves: list[Move], board: Board) -> None:
        path = Text()
        if not moves:
            path.append("already solved", style="dim")
        for i, move in enumerate(moves, 1):
            path.append(f"{i:>3}. ", style="dim")
            path.append(f"{move.label}", style="bold yellow" if move.label == PRIMARY else "bold")
            path.append(f" {move.direction.value}\n")

        body = Group(Align.center(render_board(board)), Text(""), path)
        console.print(
            Panel(
                body,
                title=f"[bold green]Solution — {len(moves)} moves[/bold green]",
                border_style="green",
                padding=(1, 2),
                expand=False,
            )
        )


def _summary_table(rows: list[tuple[SearchResult, float]]) -> Table:
    table = Table(
        title="Search summary",
        box=rich.box.SIMPLE_HEAVY,
        header_style="bold cyan",
    )
    table.add_column("Algorithm")
    table.add_column("Cost", justify="right")
    table.add_column("States", justify="right")
    table.add_column("Expanded", justify="right")
    table.add_column("Rounds", justify="right")
    table.add_column("Time (s)", justify="right")
    for result, seconds in rows:
        cost = (
            f"[green]{result.cost}[/green]" if result.solved else "[red]none[/red]"
        )
        rounds = str(result.rounds) if result.algorithm is Algorithm.IDS else "–"
        table.add_row(
            result.algorithm.value,
            cost,
            str(result.states_seen),
            str(result.nodes_expanded),
            rounds,
            f"{seconds:.3f}",
        )
    return table


# -- public entry points ------------------------------------------------------


def run(
    board: Board,
    algorithms: list[Algorithm],
    *,
    max_depth: int | None = None,
    config: SearchConfig | None = None,
) -> list[SearchResult]:
    """Solve *board* with each algorithm in turn and show the outcome."""
    console.print(_board_panel(board, f"Start {board.width}×{board.height}"))

    sink = _PanelSink()
    rows: list[tuple[SearchResult, float]] = []
    for algorithm in algorithms:
        console.rule(f"[bold cyan]{algorithm.value}[/bold cyan]")
        with RunTimer() as timer:
            result = Solver.solve(
                board, algorithm, max_depth=max_depth, config=config, sink=sink
            )
        if not result.solved:
            console.print("[red]No solution found in the explored space.[/red]")
        rows.append((result, timer.elapsed))

    console.print()
    console.print(_summary_table(rows))
    return [result for result, _ in rows]


def run_walk(board: Board, steps: int, rng: random.Random | None = None) -> None:
    """Show a random walk one board at a time."""
    start, history = RandomWalker.walk(board, steps, rng)
    console.print(_board_panel(start, "Start"))
    for i, step in enumerate(history, 1):
        style = "green" if step.board.is_solved() else "bright_blue"
        console.print(_board_panel(step.board, f"{i}. {step.move}", style))
    if history and history[-1].board.is_solved():
        console.print(f"[bold green]Goal reached after {len(history)} moves![/bold green]")

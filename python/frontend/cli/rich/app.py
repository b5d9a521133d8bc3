"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.  Shows the start board, the numbered move
list and the final board, or replays the solution move by move.
"""

from __future__ import annotations

import logging
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamenarrator import Narrator, Step
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.block import Block
from backend.models.board import Board, Cell
from backend.models.errors import NarrationError

console = Console()

_LOG = logging.getLogger(__name__)

_STYLES = {
    Cell.GENERAL: "bold white on red",
    Cell.HORIZONTAL: "bold black on yellow",
    Cell.VERTICAL: "bold black on cyan",
    Cell.PAWN: "bold black on green",
}


# -- board rendering ----------------------------------------------------------


def _moved_cells(board: Board, step: Step) -> set[tuple[int, int]]:
    tx, ty = step.target
    return set(Block(board.get(tx, ty), tx, ty).footprint)


def _render_board(board: Board, highlight: set[tuple[int, int]] | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    highlight = highlight or set()
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in board.rows[0]:
        table.add_column(width=1, justify="center")

    for y, row in enumerate(board.rows):
        cells: list[Text] = []
        for x, cell in enumerate(row):
            if cell == Cell.EMPTY:
                cells.append(Text("·", style="dim"))
                continue
            style = _STYLES[cell]
            if (x, y) in highlight:
                style += " reverse"
            cells.append(Text(cell.value, style=style))
        table.add_row(*cells)

    return table


def _render_steps(steps: list[Step]) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Block", justify="center", style="yellow")
    table.add_column("Move", style="bold cyan")
    for i, step in enumerate(steps, 1):
        table.add_row(str(i), f"({step.x},{step.y})", step.direction.value)
    return table


# -- screens ------------------------------------------------------------------


def _draw_start(board: Board) -> None:
    panel = Panel(
        Align.center(_render_board(board)),
        title="[bold]H U A R O N G   D A O[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_solution(board: Board, steps: list[Step]) -> None:
    group = Group(
        Align.center(_render_board(board, _moved_cells(board, steps[-1]))),
        Text(""),
        Align.center(_render_steps(steps)),
    )
    panel = Panel(
        group,
        title=f"[bold green]Solved in {len(steps)} moves[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _animate(board: Board, steps: list[Step], delay: float) -> None:
    game = GamePlay.from_board(board)
    for i, step in enumerate(steps):
        if not game.apply(str(step)):
            raise NarrationError(f"narrated move {step} is not legal on\n{game.board}")
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(steps)} ", style="bold cyan")
        progress.append(f"({step})", style="dim")

        panel = Panel(
            Align.center(_render_board(game.board, _moved_cells(game.board, step))),
            title="[bold cyan]Huarong Dao[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        time.sleep(delay)


# -- public entry point -------------------------------------------------------


def run(board: Board, limit: int, animate: bool = False, delay: float = 0.3) -> None:
    """Solve *board* and show the solution.

    Puzzle errors propagate to the caller.
    """
    _draw_start(board)

    with console.status("[cyan]Searching…[/cyan]"):
        node = Solver.solve(board, limit)

    if node.parent is None:
        console.print(Align.center(Text("Already solved!", style="bold green")))
        return

    steps = Narrator.steps(node)
    _LOG.debug("narrated %d steps", len(steps))

    if animate:
        _animate(board, steps, delay)
    _draw_solution(node.board, steps)

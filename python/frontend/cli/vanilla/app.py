"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) for rendering.  The solution is
written through the logging system, one line per move, and the start and
final boards are drawn around it.
"""

from __future__ import annotations

import logging
import sys
import time

from backend.engine.gamenarrator import Narrator, Step
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.block import Block
from backend.models.board import Board, Cell
from backend.models.errors import NarrationError

_LOG = logging.getLogger(__name__)


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_INV = "\033[7m"     # inverse
_R = "\033[0m"       # reset

_COLOURS = {
    Cell.GENERAL: _RED,
    Cell.HORIZONTAL: _Y,
    Cell.VERTICAL: _C,
    Cell.PAWN: _G,
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _moved_cells(board: Board, step: Step) -> set[tuple[int, int]]:
    tx, ty = step.target
    return set(Block(board.get(tx, ty), tx, ty).footprint)


def _render_board(board: Board, highlight: set[tuple[int, int]] | None = None) -> str:
    """Return an ANSI-coloured text representation of the board."""
    highlight = highlight or set()
    sep = "+" + ("---+" * len(board.rows[0]))

    lines: list[str] = [sep]
    for y, row in enumerate(board.rows):
        cells: list[str] = []
        for x, cell in enumerate(row):
            if cell == Cell.EMPTY:
                cells.append(f"{_DIM} · {_R}")
                continue
            style = _COLOURS[cell] + (_INV if (x, y) in highlight else "")
            cells.append(f"{style} {cell.value} {_R}")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- solution playback --------------------------------------------------------


def _animate(board: Board, steps: list[Step], delay: float) -> None:
    """Replay *steps* from *board*, redrawing after every slide."""
    game = GamePlay.from_board(board)
    for i, step in enumerate(steps):
        if not game.apply(str(step)):
            raise NarrationError(f"narrated move {step} is not legal on\n{game.board}")
        _clear()
        print(f"  {_C}=== Solving… ==={_R}")
        print()
        print(_render_board(game.board, _moved_cells(game.board, step)))
        print()
        print(f"  Move {i + 1}/{len(steps)}  ({step})")
        sys.stdout.flush()
        time.sleep(delay)


# -- public entry point -------------------------------------------------------


def run(board: Board, limit: int, animate: bool = False, delay: float = 0.3) -> None:
    """Solve *board* and print the solution.

    Puzzle errors propagate to the caller.
    """
    print(f"  {_BOLD}=== Huarong Dao ==={_R}")
    print()
    print(_render_board(board))
    print()

    node = Solver.solve(board, limit)
    if node.parent is None:
        print(f"  {_G}Already solved!{_R}")
        return

    steps = Narrator.steps(node)
    _LOG.info("%d steps", len(steps))
    for step in steps:
        _LOG.info("%s", step)

    if animate:
        _animate(board, steps, delay)
    else:
        print(_render_board(node.board, _moved_cells(node.board, steps[-1])))
    print()
    print(f"  {_G}Solved in {len(steps)} moves!{_R}")

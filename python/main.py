#!/usr/bin/env python3
"""Huarong Dao solver.

Usage::

    python main.py                          # solve the classic layout
    python main.py -l hengdao_lima -n 50000 # a preset with a larger budget
    python main.py -b board.txt -f rich     # a layout file, Rich output
    python main.py --animate                # replay the solution
    python main.py --list                   # show preset layouts
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import DEFAULT_NODE_LIMIT  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.errors import PuzzleError  # noqa: E402
from backend.models.layouts import DEFAULT_LAYOUT, get_layout, layout_names  # noqa: E402
from frontend.cli.log import init_log  # noqa: E402

_LOG = logging.getLogger("huarong")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _print_layouts() -> None:
    print("\n  === LAYOUTS ===")
    for name in layout_names():
        print(f"\n  --- {name} ---")
        for row in get_layout(name).rows:
            print("  " + "".join(row))
    print()


def _load_board(layout: str, board_file: Optional[Path]) -> Board:
    if board_file is not None:
        return Board.from_text(board_file.read_text())
    try:
        return get_layout(layout)
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0], param_hint="'-l' / '--layout'") from None


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    layout: str = typer.Option(
        DEFAULT_LAYOUT, "-l", "--layout",
        help="Preset layout to solve (see --list).",
    ),
    board_file: Optional[Path] = typer.Option(
        None, "-b", "--board",
        exists=True, dir_okay=False, readable=True,
        help="Text file with 5 lines of 4 tokens (c h v p x). Overrides --layout.",
    ),
    limit: int = typer.Option(
        DEFAULT_NODE_LIMIT, "-n", "--limit",
        min=1, envvar="HRD_NODE_LIMIT",
        help="Maximum number of boards kept by the search.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output renderer.",
    ),
    animate: bool = typer.Option(
        False, "--animate/--no-animate",
        help="Replay the solution one move at a time.",
    ),
    delay: float = typer.Option(
        0.3, "--delay",
        min=0.0,
        help="Seconds between moves when animating.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.info, "--log-level",
        envvar="HRD_LOG_LEVEL", case_sensitive=False,
        help="Logging threshold.",
    ),
    list_layouts: bool = typer.Option(
        False, "--list",
        help="Show the preset layouts and exit.",
    ),
) -> None:
    """Find a shortest solution for a Huarong Dao board."""
    if list_layouts:
        _print_layouts()
        return

    init_log(log_level.value, rich=frontend is Frontend.rich)
    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        board = _load_board(layout, board_file)
        mod.run(board, limit, animate=animate, delay=delay)
    except PuzzleError as exc:
        _LOG.error("%s", exc)
        raise typer.Exit(code=1) from None


if __name__ == "__main__":
    app()

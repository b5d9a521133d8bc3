"""Board model for the Huarong Dao puzzle."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import BoardFormatError

WIDTH = 4
HEIGHT = 5

# Top-left cell of the General once the puzzle is solved.
GOAL_ANCHOR = (1, 3)


class Cell(StrEnum):
    """Content of one grid cell; values double as the text tokens."""

    GENERAL = "c"
    HORIZONTAL = "h"
    VERTICAL = "v"
    PAWN = "p"
    EMPTY = "x"


class Direction(StrEnum):
    UP = "up"
    UP2 = "up2"
    DOWN = "down"
    DOWN2 = "down2"
    LEFT = "left"
    LEFT2 = "left2"
    RIGHT = "right"
    RIGHT2 = "right2"

    @property
    def delta(self) -> tuple[int, int]:
        """Anchor offset ``(dx, dy)`` of a slide in this direction."""
        return _DELTAS[self]

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Direction | None:
        return _BY_DELTA.get((dx, dy))


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.UP2: (0, -2),
    Direction.DOWN: (0, 1),
    Direction.DOWN2: (0, 2),
    Direction.LEFT: (-1, 0),
    Direction.LEFT2: (-2, 0),
    Direction.RIGHT: (1, 0),
    Direction.RIGHT2: (2, 0),
}

_BY_DELTA = {delta: d for d, delta in _DELTAS.items()}


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the 4×5 grid.

    Cells are stored as a flat row-major tuple so boards hash cheaply and
    can be used directly as keys of the search frontier.
    """

    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != WIDTH * HEIGHT:
            raise BoardFormatError(
                f"Expected {WIDTH * HEIGHT} cells for a {WIDTH}×{HEIGHT} board, "
                f"got {len(self.cells)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> Board:
        return cls(cells=tuple(cell for row in rows for cell in row))

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse a layout of 5 lines with 4 tokens each.

        Surrounding whitespace and blank lines are ignored, so indented
        triple-quoted strings work::

            Board.from_text('''
                vvxv
                vvxv
                vvcc
                vvcc
                pppp
            ''')
        """
        rows: list[list[Cell]] = []
        for line in (raw.strip() for raw in text.splitlines()):
            if not line:
                continue
            row: list[Cell] = []
            for ch in line:
                try:
                    row.append(Cell(ch))
                except ValueError:
                    raise BoardFormatError(f"unknown token {ch!r}") from None
            rows.append(row)

        cols = {len(row) for row in rows}
        if len(rows) != HEIGHT or cols != {WIDTH}:
            width = max(cols, default=0)
            raise BoardFormatError(f"size error {len(rows)}x{width}")
        return cls.from_rows(rows)

    @classmethod
    def empty(cls) -> Board:
        return cls(cells=(Cell.EMPTY,) * (WIDTH * HEIGHT))

    # -- queries --------------------------------------------------------------

    def get(self, x: int, y: int) -> Cell:
        return self.cells[y * WIDTH + x]

    @property
    def rows(self) -> list[tuple[Cell, ...]]:
        return [self.cells[y * WIDTH : (y + 1) * WIDTH] for y in range(HEIGHT)]

    def is_solved(self) -> bool:
        """Check whether the General covers the bottom-centre goal cells."""
        gx, gy = GOAL_ANCHOR
        return (
            self.get(gx, gy + 1) == Cell.GENERAL
            and self.get(gx + 1, gy + 1) == Cell.GENERAL
        )

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    # -- derivation -----------------------------------------------------------

    def replace(self, changes: Mapping[tuple[int, int], Cell]) -> Board:
        """Return a new board with ``(x, y) -> cell`` *changes* applied."""
        cells = list(self.cells)
        for (x, y), cell in changes.items():
            cells[y * WIDTH + x] = cell
        return Board(cells=tuple(cells))

    def to_text(self) -> str:
        return "\n".join("".join(row) for row in self.rows)

    def __str__(self) -> str:
        return self.to_text()

"""Block shapes and footprints."""

from __future__ import annotations

from typing import NamedTuple

from backend.models.board import Cell

# (width, height) of each block type.
SHAPES: dict[Cell, tuple[int, int]] = {
    Cell.GENERAL: (2, 2),
    Cell.HORIZONTAL: (2, 1),
    Cell.VERTICAL: (1, 2),
    Cell.PAWN: (1, 1),
}


def footprint_offsets(kind: Cell) -> tuple[tuple[int, int], ...]:
    """Offsets of every cell a block of *kind* occupies, anchor first."""
    w, h = SHAPES[kind]
    return tuple((dx, dy) for dy in range(h) for dx in range(w))


class Block(NamedTuple):
    """A placed piece: its type and the top-left cell it occupies."""

    kind: Cell
    x: int
    y: int

    @property
    def footprint(self) -> tuple[tuple[int, int], ...]:
        return tuple((self.x + dx, self.y + dy) for dx, dy in footprint_offsets(self.kind))

    @property
    def anchor(self) -> tuple[int, int]:
        return (self.x, self.y)

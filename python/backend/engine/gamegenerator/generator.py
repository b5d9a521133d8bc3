"""Enumerates every board reachable from a position by one slide."""

from __future__ import annotations

from typing import NamedTuple

from backend.engine.gamestate import GameState
from backend.models.block import Block, footprint_offsets
from backend.models.board import Board, Cell, Direction, in_bounds


class Slide(NamedTuple):
    """One movement rule, expressed relative to the block anchor."""

    direction: Direction
    required: tuple[tuple[int, int], ...]  # must be empty, row-major
    vacated: tuple[tuple[int, int], ...]
    filled: tuple[tuple[int, int], ...]  # already shifted by the slide


class Move(NamedTuple):
    block: Block
    direction: Direction
    board: Board


# Directions each block type may slide in, in generation order.
_DIRECTIONS: dict[Cell, tuple[Direction, ...]] = {
    Cell.GENERAL: (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT),
    Cell.HORIZONTAL: (
        Direction.UP, Direction.DOWN,
        Direction.LEFT, Direction.LEFT2,
        Direction.RIGHT, Direction.RIGHT2,
    ),
    Cell.VERTICAL: (
        Direction.UP, Direction.UP2,
        Direction.DOWN, Direction.DOWN2,
        Direction.LEFT, Direction.RIGHT,
    ),
    Cell.PAWN: tuple(Direction),
}


def _build_slide(kind: Cell, direction: Direction) -> Slide:
    dx, dy = direction.delta
    distance = max(abs(dx), abs(dy))
    ux, uy = dx // distance, dy // distance
    old = footprint_offsets(kind)
    old_set = set(old)

    # Cells entered at each unit step; for a two-cell slide this includes
    # the intervening cell, so both cells must match the empty pair.
    required: list[tuple[int, int]] = []
    for step in range(1, distance + 1):
        for ox, oy in old:
            cell = (ox + ux * step, oy + uy * step)
            if cell not in old_set and cell not in required:
                required.append(cell)

    new = tuple((ox + dx, oy + dy) for ox, oy in old)
    new_set = set(new)
    return Slide(
        direction=direction,
        required=tuple(sorted(required, key=lambda c: (c[1], c[0]))),
        vacated=tuple(c for c in old if c not in new_set),
        filled=tuple(c for c in new if c not in old_set),
    )


_SLIDES: dict[Cell, tuple[Slide, ...]] = {
    kind: tuple(_build_slide(kind, d) for d in directions)
    for kind, directions in _DIRECTIONS.items()
}


class MoveGenerator:
    """Stateless move generator — all methods are static."""

    @staticmethod
    def legal_moves(state: GameState) -> list[Move]:
        """Return every single-block slide available in *state*.

        Results follow block order, then the direction order of the slide
        table.  Duplicates are not filtered.
        """
        empties = state.empty_cells
        moves: list[Move] = []
        for block in state.blocks:
            for slide in _SLIDES[block.kind]:
                target = MoveGenerator._target_cells(block, slide)
                if target is None:
                    continue
                if not MoveGenerator._matches(target, empties):
                    continue
                moves.append(Move(block, slide.direction, MoveGenerator._apply(state.board, block, slide)))
        return moves

    @staticmethod
    def next_boards(state: GameState) -> list[Board]:
        return [move.board for move in MoveGenerator.legal_moves(state)]

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _target_cells(block: Block, slide: Slide) -> tuple[tuple[int, int], ...] | None:
        """Absolute cells the slide needs empty, or ``None`` if off the board."""
        cells = tuple((block.x + ox, block.y + oy) for ox, oy in slide.required)
        if not all(in_bounds(x, y) for x, y in cells):
            return None
        return cells

    @staticmethod
    def _matches(
        target: tuple[tuple[int, int], ...], empties: tuple[tuple[int, int], ...]
    ) -> bool:
        # A pair must be exactly the two empty cells; a single cell may be either.
        if len(target) == 1:
            return target[0] in empties
        return target == empties

    @staticmethod
    def _apply(board: Board, block: Block, slide: Slide) -> Board:
        changes: dict[tuple[int, int], Cell] = {}
        for ox, oy in slide.vacated:
            changes[(block.x + ox, block.y + oy)] = Cell.EMPTY
        for ox, oy in slide.filled:
            changes[(block.x + ox, block.y + oy)] = block.kind
        return board.replace(changes)

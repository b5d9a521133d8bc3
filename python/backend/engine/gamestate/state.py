"""Splits a board into its discrete blocks and empty cells."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.block import Block
from backend.models.board import HEIGHT, WIDTH, Board, Cell, in_bounds
from backend.models.errors import BoardValidationError

BLOCK_COUNT = 10
EMPTY_COUNT = 2


@dataclass(frozen=True)
class GameState:
    """A board together with its blocks and the two empty cells.

    Blocks are listed in row-major discovery order and empty cells as
    ``(x, y)`` in the same order, so two states built from equal boards
    are always identical.
    """

    board: Board
    blocks: tuple[Block, ...]
    empty_cells: tuple[tuple[int, int], ...]

    # -- construction ---------------------------------------------------------

    @classmethod
    def from_board(cls, board: Board) -> GameState:
        """Extract blocks from an externally supplied *board*, checking shapes.

        Raises ``BoardValidationError`` when a footprint is broken, the
        General count is not one, or the block / empty counts are off.
        """
        state = cls._scan(board, strict=True)

        generals = sum(1 for b in state.blocks if b.kind == Cell.GENERAL)
        if generals != 1:
            raise BoardValidationError(
                f"There must be exactly one General block, found {generals}"
            )
        if len(state.blocks) != BLOCK_COUNT:
            raise BoardValidationError(
                f"block must be {BLOCK_COUNT}, but get {len(state.blocks)}"
            )
        if len(state.empty_cells) != EMPTY_COUNT:
            raise BoardValidationError(
                f"empty cell must be {EMPTY_COUNT}, but get {len(state.empty_cells)}"
            )
        return state

    @classmethod
    def from_board_unchecked(cls, board: Board) -> GameState:
        """Extract blocks from a board derived from an already validated one."""
        return cls._scan(board, strict=False)

    @classmethod
    def _scan(cls, board: Board, *, strict: bool) -> GameState:
        claimed = [False] * (WIDTH * HEIGHT)
        blocks: list[Block] = []
        empty_cells: list[tuple[int, int]] = []

        for y in range(HEIGHT):
            for x in range(WIDTH):
                kind = board.get(x, y)
                if kind == Cell.EMPTY:
                    empty_cells.append((x, y))
                    continue
                if claimed[y * WIDTH + x]:
                    continue

                block = Block(kind, x, y)
                for cx, cy in block.footprint:
                    if strict:
                        cls._check_cell(board, claimed, block, cx, cy)
                    claimed[cy * WIDTH + cx] = True
                blocks.append(block)

        return cls(board=board, blocks=tuple(blocks), empty_cells=tuple(empty_cells))

    @staticmethod
    def _check_cell(
        board: Board, claimed: list[bool], block: Block, cx: int, cy: int
    ) -> None:
        where = f"{block.kind.name.lower()} block at ({block.x},{block.y})"
        if not in_bounds(cx, cy):
            raise BoardValidationError(f"{where} extends off the board")
        if claimed[cy * WIDTH + cx]:
            raise BoardValidationError(f"{where} overlaps another block at ({cx},{cy})")
        if board.get(cx, cy) != block.kind:
            raise BoardValidationError(
                f"{where} is incomplete: ({cx},{cy}) holds {board.get(cx, cy).name.lower()}"
            )

    # -- queries --------------------------------------------------------------

    @property
    def general(self) -> Block:
        return next(b for b in self.blocks if b.kind == Cell.GENERAL)

    def to_board(self) -> Board:
        """Paint the blocks back onto an empty grid."""
        changes = {cell: block.kind for block in self.blocks for cell in block.footprint}
        return Board.empty().replace(changes)

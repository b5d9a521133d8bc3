"""Move generator tests — slide rules per block type and board invariants."""

from __future__ import annotations

import pytest

from backend.engine.gamegenerator import MoveGenerator
from backend.engine.gamestate import GameState
from backend.models.block import Block
from backend.models.board import Board, Cell, Direction
from backend.models.layouts import get_layout, layout_names

C, H, V, P = Cell.GENERAL, Cell.HORIZONTAL, Cell.VERTICAL, Cell.PAWN


# -- helpers ------------------------------------------------------------------


def _moves(text: str) -> list[tuple[Block, Direction, str]]:
    state = GameState.from_board(Board.from_text(text))
    return [
        (m.block, m.direction, m.board.to_text())
        for m in MoveGenerator.legal_moves(state)
    ]


def _occupied(board: Board) -> int:
    return sum(1 for cell in board.cells if cell != Cell.EMPTY)


# -- per block type -----------------------------------------------------------


def test_classic_vertical_side_slides() -> None:
    assert _moves("vvxv\nvvxv\nvvcc\nvvcc\npppp") == [
        (Block(V, 1, 0), Direction.RIGHT, "vxvv\nvxvv\nvvcc\nvvcc\npppp"),
        (Block(V, 3, 0), Direction.LEFT, "vvvx\nvvvx\nvvcc\nvvcc\npppp"),
    ]


def test_vertical_one_and_two_cell_slides() -> None:
    assert _moves("vvxv\nvvxv\nccvp\nccvp\nhhpp") == [
        (Block(V, 1, 0), Direction.RIGHT, "vxvv\nvxvv\nccvp\nccvp\nhhpp"),
        (Block(V, 3, 0), Direction.LEFT, "vvvx\nvvvx\nccvp\nccvp\nhhpp"),
        (Block(V, 2, 2), Direction.UP, "vvxv\nvvvv\nccvp\nccxp\nhhpp"),
        (Block(V, 2, 2), Direction.UP2, "vvvv\nvvvv\nccxp\nccxp\nhhpp"),
    ]


def test_horizontal_one_and_two_cell_slides() -> None:
    assert _moves("vccv\nvccv\nhhxx\nvhhp\nvppp") == [
        (Block(V, 3, 0), Direction.DOWN, "vccx\nvccv\nhhxv\nvhhp\nvppp"),
        (Block(H, 0, 2), Direction.RIGHT, "vccv\nvccv\nxhhx\nvhhp\nvppp"),
        (Block(H, 0, 2), Direction.RIGHT2, "vccv\nvccv\nxxhh\nvhhp\nvppp"),
        (Block(P, 3, 3), Direction.UP, "vccv\nvccv\nhhxp\nvhhx\nvppp"),
    ]


def test_pawn_one_and_two_cell_slides() -> None:
    assert _moves("vccv\nvccv\nvhhv\nvppv\npxxp") == [
        (Block(P, 1, 3), Direction.DOWN, "vccv\nvccv\nvhhv\nvxpv\nppxp"),
        (Block(P, 2, 3), Direction.DOWN, "vccv\nvccv\nvhhv\nvpxv\npxpp"),
        (Block(P, 0, 4), Direction.RIGHT, "vccv\nvccv\nvhhv\nvppv\nxpxp"),
        (Block(P, 0, 4), Direction.RIGHT2, "vccv\nvccv\nvhhv\nvppv\nxxpp"),
        (Block(P, 3, 4), Direction.LEFT, "vccv\nvccv\nvhhv\nvppv\npxpx"),
        (Block(P, 3, 4), Direction.LEFT2, "vccv\nvccv\nvhhv\nvppv\nppxx"),
    ]


def test_general_needs_a_matching_pair() -> None:
    # Empties beside the General but in different rows/columns block it.
    moves = _moves("vccv\nvccv\nhhxv\nvxpv\nvppp")
    assert all(m[0].kind != C for m in moves)

    moves = _moves("vccv\nvccv\npxxp\nvhhv\nvppv")
    assert (Block(C, 1, 0), Direction.DOWN, "vxxv\nvccv\npccp\nvhhv\nvppv") in moves


def test_pawn_two_cell_slide_needs_the_intervening_cell() -> None:
    # Destination empty but the cell in between is occupied.
    moves = _moves("pxpx\nvccv\nvccv\nvhhv\nvppv")
    assert (Block(P, 0, 0), Direction.RIGHT, "xppx\nvccv\nvccv\nvhhv\nvppv") in moves
    assert all(d is not Direction.RIGHT2 for b, d, _ in moves if b == Block(P, 0, 0))


def test_edge_blocks_do_not_leave_the_board() -> None:
    state = GameState.from_board(get_layout("hengdao_lima"))
    for move in MoveGenerator.legal_moves(state):
        for x, y in move.block.footprint:
            dx, dy = move.direction.delta
            assert 0 <= x + dx < 4
            assert 0 <= y + dy < 5


# -- invariants ---------------------------------------------------------------


@pytest.mark.parametrize("name", layout_names())
def test_children_preserve_counts_and_move_one_block(name: str) -> None:
    board = get_layout(name)
    state = GameState.from_board(board)
    frontier = [board] + MoveGenerator.next_boards(state)
    seen: set[Board] = set()

    # Two levels deep is enough to cover every block type moving.
    for parent in frontier:
        if parent in seen:
            continue
        seen.add(parent)
        parent_state = GameState.from_board(parent)
        for child in MoveGenerator.next_boards(parent_state):
            child_state = GameState.from_board(child)
            assert child.count(Cell.EMPTY) == 2
            assert _occupied(child) == _occupied(parent)
            vanished = set(parent_state.blocks) - set(child_state.blocks)
            appeared = set(child_state.blocks) - set(parent_state.blocks)
            assert len(vanished) == 1
            assert len(appeared) == 1


def test_next_boards_matches_legal_moves() -> None:
    state = GameState.from_board(get_layout("classic"))
    assert MoveGenerator.next_boards(state) == [
        m.board for m in MoveGenerator.legal_moves(state)
    ]

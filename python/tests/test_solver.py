"""Solver test suite.

Solutions are checked against an independent breadth-first oracle for
length and replayed through ``GamePlay`` to make sure every narrated move
is legal and the last one wins.  Slow layouts are bounded by
``pytest-timeout`` (configured in ``pyproject.toml``).
"""

from __future__ import annotations

import pytest

from backend.engine.gamegenerator import MoveGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import DEFAULT_NODE_LIMIT, Node, Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.errors import (
    BoardValidationError,
    SearchLimitExceeded,
    UnsolvableError,
)
from backend.models.layouts import get_layout

SOLVED = "vhhv\nvppv\npxxp\nvccv\nvccv"


# -- helpers ------------------------------------------------------------------


def _oracle_depth(board: Board) -> int | None:
    """Length of a shortest solution by plain level-by-level search."""
    seen = {board}
    level = [board]
    depth = 0
    while level:
        if any(b.is_solved() for b in level):
            return depth
        following: list[Board] = []
        for b in level:
            for child in MoveGenerator.next_boards(GameState.from_board_unchecked(b)):
                if child not in seen:
                    seen.add(child)
                    following.append(child)
        level = following
        depth += 1
    return None


def _assert_replays(board: Board, node: Node) -> None:
    """Replay the narrated moves and compare against the search path."""
    path = node.path()
    assert path[0] == board
    assert len(path) == node.depth + 1

    steps = Solver.solve_steps(board, limit=10**6)
    assert len(steps) == node.depth

    game = GamePlay.from_board(board)
    for i, message in enumerate(steps):
        ok = game.apply(message)
        assert ok, f"Move {i} ({message}) was invalid on\n{game.board}"
        assert game.board == path[i + 1]

    assert game.is_won
    assert game.moves == node.depth


# -- solving ------------------------------------------------------------------


def test_classic_solves_within_default_budget() -> None:
    board = get_layout("classic")
    node = Solver.solve(board, DEFAULT_NODE_LIMIT)
    assert node.board.is_solved()
    assert node.depth > 0
    assert node.depth == _oracle_depth(board)
    _assert_replays(board, node)


@pytest.mark.timeout(120)
def test_traditional_opening_is_shortest() -> None:
    board = get_layout("hengdao_lima")
    node = Solver.solve(board, limit=100_000)
    assert node.board.is_solved()
    assert node.depth == _oracle_depth(board)


def test_parent_chain_has_increasing_depth() -> None:
    node = Solver.solve(get_layout("classic"))
    depth = node.depth
    while node.parent is not None:
        assert node.parent.depth == node.depth - 1
        node = node.parent
    assert node.depth == 0
    assert depth > 0


def test_solution_is_deterministic() -> None:
    board = get_layout("classic")
    assert Solver.solve_steps(board) == Solver.solve_steps(board)


def test_already_solved_board_returns_root() -> None:
    board = Board.from_text(SOLVED)
    node = Solver.solve(board, limit=1)
    assert node.parent is None
    assert node.depth == 0
    assert Solver.solve_steps(board) == []
    assert Solver.hint(board) is None


def test_hint_is_first_step() -> None:
    board = get_layout("classic")
    hint = Solver.hint(board)
    assert hint is not None
    assert str(hint) == Solver.solve_steps(board)[0]
    assert str(hint) in {"(1,0) right", "(3,0) left"}


# -- failures -----------------------------------------------------------------


def test_budget_of_one_is_exhausted() -> None:
    with pytest.raises(SearchLimitExceeded, match="node size exceed 1") as info:
        Solver.solve(get_layout("classic"), limit=1)
    assert info.value.limit == 1


def test_small_budget_is_exhausted() -> None:
    with pytest.raises(SearchLimitExceeded):
        Solver.solve(get_layout("hengdao_lima"), limit=50)


def test_exhausted_frontier_is_unsolvable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(MoveGenerator, "next_boards", staticmethod(lambda state: []))
    with pytest.raises(UnsolvableError):
        Solver.solve(get_layout("classic"))


def test_invalid_start_board_is_rejected() -> None:
    with pytest.raises(BoardValidationError):
        Solver.solve(Board.from_text("xxxx\nxxxx\nxxxx\nxxxx\nxxxx"))

"""Replays slides on a board — applies moves and checks the win condition."""

from __future__ import annotations

from backend.engine.gamegenerator import MoveGenerator
from backend.engine.gamenarrator import Step
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single replay session."""

    def __init__(self, board: Board) -> None:
        GameState.from_board(board)
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a session from a validated start board."""
        return cls(board)

    # -- movement -------------------------------------------------------------

    def move(self, x: int, y: int, direction: Direction) -> bool:
        """Slide the block anchored at (x, y) in *direction*.

        Only slides the move generator offers are accepted.
        Returns True if the move was applied.
        """
        state = GameState.from_board_unchecked(self.board)
        for candidate in MoveGenerator.legal_moves(state):
            if candidate.block.anchor == (x, y) and candidate.direction == direction:
                self.board = candidate.board
                self.moves += 1
                return True
        return False

    def apply(self, message: str) -> bool:
        """Apply a narrated move such as ``"(2,0) down"``.

        Raises ``ValueError`` if *message* cannot be parsed.
        """
        step = Step.parse(message)
        return self.move(step.x, step.y, step.direction)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()

"""Turns a solution path into human-readable move descriptions."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from backend.engine.gamestate import GameState
from backend.models.block import Block
from backend.models.board import Board, Direction
from backend.models.errors import NarrationError

if TYPE_CHECKING:
    from backend.engine.gamesolver.node import Node

_STEP_RE = re.compile(r"^\((\d+),(\d+)\) (\w+)$")


class Step(NamedTuple):
    """One slide: the moved block's anchor before the move, and where it went."""

    x: int
    y: int
    direction: Direction

    def __str__(self) -> str:
        return f"({self.x},{self.y}) {self.direction.value}"

    @property
    def target(self) -> tuple[int, int]:
        """Anchor of the block after the move."""
        dx, dy = self.direction.delta
        return (self.x + dx, self.y + dy)

    @classmethod
    def parse(cls, text: str) -> Step:
        """Parse ``"(x,y) direction"`` as produced by ``str(step)``."""
        match = _STEP_RE.match(text.strip())
        if match is None:
            raise ValueError(f"Malformed move description: {text!r}")
        x, y, label = match.groups()
        try:
            direction = Direction(label)
        except ValueError:
            raise ValueError(f"Unknown direction {label!r} in {text!r}") from None
        return cls(int(x), int(y), direction)


class Narrator:
    """Stateless narrator — all methods are static."""

    @staticmethod
    def steps(node: Node) -> list[Step]:
        """Return the moves leading from the root to *node*, in play order.

        Raises ``NarrationError`` if *node* is the root or if two
        consecutive boards are not one slide apart.
        """
        if node.parent is None:
            raise NarrationError("node is last, no message")

        steps: list[Step] = []
        current = node
        current_state = GameState.from_board_unchecked(current.board)
        while current.parent is not None:
            previous = current.parent
            previous_state = GameState.from_board_unchecked(previous.board)
            steps.append(Narrator.describe(previous_state, current_state))
            current, current_state = previous, previous_state
        steps.reverse()
        return steps

    @staticmethod
    def messages(node: Node) -> list[str]:
        return [str(step) for step in Narrator.steps(node)]

    @staticmethod
    def describe(before: GameState, after: GameState) -> Step:
        """Identify the single slide turning *before* into *after*."""
        vanished = set(before.blocks) - set(after.blocks)
        appeared = set(after.blocks) - set(before.blocks)
        if len(vanished) != 1 or len(appeared) != 1:
            raise NarrationError(
                "the two boards are not one move apart:\n"
                f"{_side_by_side(before.board, after.board)}"
            )

        (old,) = vanished
        (new,) = appeared
        if old.kind != new.kind:
            raise NarrationError(
                f"block type changed from {old.kind.name.lower()} to {new.kind.name.lower()}"
            )

        direction = Direction.from_delta(new.x - old.x, new.y - old.y)
        if direction is None:
            raise NarrationError(f"unknown move {_anchor(old)} => {_anchor(new)}")
        return Step(old.x, old.y, direction)


# -- helpers ------------------------------------------------------------------


def _anchor(block: Block) -> str:
    return f"({block.x},{block.y})"


def _side_by_side(left: Board, right: Board) -> str:
    return "\n".join(
        f"{''.join(a)}  {''.join(b)}" for a, b in zip(left.rows, right.rows)
    )

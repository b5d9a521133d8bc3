"""Search tree node."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board


@dataclass(frozen=True, eq=False)
class Node:
    """A board reached during search, linked to the node it was found from.

    The root has no parent and depth 0.  Nodes compare by identity; the
    search keys its frontier on ``board`` instead.
    """

    board: Board
    parent: Node | None = None
    depth: int = 0

    def child(self, board: Board) -> Node:
        return Node(board=board, parent=self, depth=self.depth + 1)

    def path(self) -> list[Board]:
        """Boards from the root to this node, in play order."""
        boards: list[Board] = []
        node: Node | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards

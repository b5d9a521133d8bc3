"""Huarong Dao solver.

Breadth-first search over whole-board states.  Every slide costs one
move, so always expanding the shallowest open node yields a shortest
solution.  Among nodes of equal depth the one discovered first is
expanded first.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from backend.engine.gamegenerator import MoveGenerator
from backend.engine.gamenarrator import Narrator, Step
from backend.engine.gamesolver.node import Node
from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.errors import SearchLimitExceeded, UnsolvableError

DEFAULT_NODE_LIMIT = 1024

_LOG = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        limit: int = DEFAULT_NODE_LIMIT,
        logger: logging.Logger | None = None,
    ) -> Node:
        """Return the goal node of a shortest solution for *board*.

        *limit* caps the combined size of the open and closed sets; once
        reached, ``SearchLimitExceeded`` is raised instead of expanding
        further.  ``UnsolvableError`` is raised if every reachable board
        has been expanded without success.  The start board is validated
        first and may raise ``BoardValidationError``.
        """
        log = logger or _LOG
        GameState.from_board(board)

        root = Node(board=board)
        counter = itertools.count()
        heap: list[tuple[int, int, Node]] = [(root.depth, next(counter), root)]
        open_set: dict[Board, Node] = {board: root}
        closed_set: dict[Board, Node] = {}
        log.debug("search started, limit %d", limit)

        while True:
            if not heap:
                log.warning("no solution after expanding %d boards", len(closed_set))
                raise UnsolvableError(
                    f"can't find solve after expanding {len(closed_set)} boards"
                )

            _, _, node = heap[0]
            if node.board.is_solved():
                log.info(
                    "solved in %d moves (%d open, %d closed)",
                    node.depth, len(open_set), len(closed_set),
                )
                return node

            if len(open_set) + len(closed_set) >= limit:
                log.warning(
                    "node budget of %d reached at depth %d", limit, node.depth
                )
                raise SearchLimitExceeded(limit)

            heapq.heappop(heap)
            del open_set[node.board]
            closed_set[node.board] = node

            state = GameState.from_board_unchecked(node.board)
            for child_board in MoveGenerator.next_boards(state):
                if child_board in closed_set or child_board in open_set:
                    continue
                child = node.child(child_board)
                open_set[child_board] = child
                heapq.heappush(heap, (child.depth, next(counter), child))

    @staticmethod
    def solve_steps(board: Board, limit: int = DEFAULT_NODE_LIMIT) -> list[str]:
        """Return the move descriptions of a shortest solution.

        An already solved board yields ``[]``.
        """
        node = Solver.solve(board, limit)
        if node.parent is None:
            return []
        return Narrator.messages(node)

    @staticmethod
    def hint(board: Board, limit: int = DEFAULT_NODE_LIMIT) -> Step | None:
        """Return the first move of a shortest solution, or ``None`` if solved."""
        node = Solver.solve(board, limit)
        if node.parent is None:
            return None
        return Narrator.steps(node)[0]

"""Exception hierarchy shared by the board model and the solver engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised while loading or solving a board."""


class BoardFormatError(PuzzleError, ValueError):
    """The text layout has an unknown token or the wrong dimensions."""


class BoardValidationError(PuzzleError, ValueError):
    """The board breaks a structural invariant (block shapes or counts)."""


class SearchLimitExceeded(PuzzleError):
    """The search reached its node budget before finding the goal."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"node size exceed {limit}")
        self.limit = limit


class UnsolvableError(PuzzleError):
    """Every reachable board was expanded without reaching the goal."""


class NarrationError(PuzzleError):
    """Two consecutive boards are not connected by a single slide."""

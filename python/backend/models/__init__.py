from backend.models.block import Block
from backend.models.board import Board, Cell, Direction
from backend.models.errors import (
    BoardFormatError,
    BoardValidationError,
    NarrationError,
    PuzzleError,
    SearchLimitExceeded,
    UnsolvableError,
)
from backend.models.layouts import get_layout, layout_names

__all__ = [
    "Block",
    "Board",
    "BoardFormatError",
    "BoardValidationError",
    "Cell",
    "Direction",
    "NarrationError",
    "PuzzleError",
    "SearchLimitExceeded",
    "UnsolvableError",
    "get_layout",
    "layout_names",
]

"""Named start layouts bundled with the solver."""

from __future__ import annotations

from backend.models.board import Board

_LAYOUTS: dict[str, str] = {
    "classic": """
        vvxv
        vvxv
        vvcc
        vvcc
        pppp
    """,
    "level3": """
        phhp
        vccv
        vccv
        vppv
        vxxv
    """,
    # The traditional opening, "Cutting off the road on horseback".
    "hengdao_lima": """
        vccv
        vccv
        vhhv
        vppv
        pxxp
    """,
}

DEFAULT_LAYOUT = "classic"


def layout_names() -> list[str]:
    return list(_LAYOUTS)


def get_layout(name: str) -> Board:
    """Return the parsed board for the preset *name*.

    Raises ``KeyError`` for unknown names.
    """
    if name not in _LAYOUTS:
        raise KeyError(f"Unknown layout {name!r}; choose from {', '.join(_LAYOUTS)}.")
    return Board.from_text(_LAYOUTS[name])

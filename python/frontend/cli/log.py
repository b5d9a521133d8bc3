"""Process-wide logging setup for the CLI frontends.

The backend only ever writes to ``logging.getLogger(__name__)`` (or a
logger handed to it); handlers are installed here, once, at startup.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = (
    "%(asctime)s.%(msecs)03d %(levelname)-5s [%(threadName)s] %(name)s -- %(message)s"
)
PLAIN_DATEFMT = "%y-%m-%d %H:%M:%S"


def init_log(level: str | int = logging.INFO, *, rich: bool = False,
             console: Console | None = None) -> None:
    """Configure the root logger.

    With *rich* the records go through a ``RichHandler`` (coloured level,
    aligned columns); otherwise a plain stderr handler with a timestamped
    pattern is used.  Calling it again replaces the previous handlers.
    """
    handler: logging.Handler
    if rich:
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATEFMT))

    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, handlers=[handler], force=True)

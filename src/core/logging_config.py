"""Logging setup for entry-points.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are installed here, by the CLI, so embedding applications keep control of
their own logging configuration.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "api-manager-rich"


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Install a single Rich handler on the root logger.

    Calling it twice replaces the previous handler instead of stacking a new one.
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level.upper())
    return root

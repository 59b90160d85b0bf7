"""Logging configuration.

Modules log through `logging.getLogger(__name__)`; this is the one place that
attaches a handler. Records go to stderr through Rich so they never mix with
converted values on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "baseconv"


def configure_logging(level: str | int = "WARNING") -> None:
    """Install (or reconfigure) the Rich handler on the root logger."""

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)

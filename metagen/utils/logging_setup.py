"""Central logging setup for metagen."""
from __future__ import annotations
import logging
import sys
from typing import TextIO


def setup_logging(level: str | int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure root logger with a single stream handler.

    Args:
        level: Logging level, as a name ("INFO") or a number.
        stream: Where log lines go; stdout when not given.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)

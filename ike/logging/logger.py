# ike/logging/logger.py
"""
Unified logging setup for ike.

All modules use:
    from ike.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration (format, level, handler) lives in configure_logging() only.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO = sys.stderr,
) -> None:
    """
    Configure the root logging handler.

    Called once early (e.g. the CLI entrypoint). Repeated calls only adjust
    the level; a second handler is never added.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Does not configure anything."""
    return logging.getLogger(name)

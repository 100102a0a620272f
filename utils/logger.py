"""
utils/logger.py
---------------
Logging setup shared by every layer.
Modules call `get_logger(__name__)`; the command line may call
`configure_logging(level)` first to override LOG_LEVEL from the environment.
"""

import logging
import sys
from typing import Optional, TextIO

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_HANDLER_NAME = "lightbnb-db"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {name}")
    return resolved


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Install the project's stdout handler on the root logger.

    Repeated calls reuse the installed handler and only update the level,
    so importing several modules never duplicates log lines.

    Args:
        level: Level name such as "DEBUG"; defaults to LOG_LEVEL.
        stream: Where to write; defaults to stdout.

    Returns:
        The handler in use.

    Raises:
        ValueError: If `level` is not a known logging level name.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, installing the shared handler on first use."""
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        configure_logging()
    return logging.getLogger(name)

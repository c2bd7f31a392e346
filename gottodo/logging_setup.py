"""
FILE: gottodo/logging_setup.py
PURPOSE: Logging configuration and the in-memory debug log
EXPORTS:
  - DebugLogHandler (logging.Handler backed by a bounded deque)
  - setup_logging(debug) -> DebugLogHandler | None
DEPENDENCIES:
  - logging (stdlib)
  - collections.deque (stdlib)
NOTES:
  - Nothing is ever written to the terminal: the UI owns the screen
  - The debug handler is the debug pane's data source
  - Debug log lives in memory only and is never persisted
"""

import logging
from collections import deque
from typing import List, Optional

from .core.constants import DEBUG_LOG_CAPACITY


PACKAGE_LOGGER = "gottodo"


class DebugLogHandler(logging.Handler):
    """Keeps the most recent formatted log messages, oldest evicted first."""

    def __init__(self, capacity: int = DEBUG_LOG_CAPACITY, level: int = logging.DEBUG):
        super().__init__(level)
        self.lines = deque(maxlen=capacity)
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.lines.append(self.format(record))
        except Exception:
            self.handleError(record)

    def tail(self, count: int) -> List[str]:
        """Return the newest `count` lines, oldest first."""
        if count <= 0:
            return []
        return list(self.lines)[-count:]

    def __len__(self) -> int:
        return len(self.lines)


def setup_logging(debug: bool = False) -> Optional[DebugLogHandler]:
    """
    Configure the package logger for an interactive run.

    Call this ONCE, before the session starts.

    Args:
        debug: Attach an in-memory debug log

    Returns:
        The DebugLogHandler when debug is on, otherwise None
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(logger.handlers):
        logger.removeHandler(h)

    # Root handlers would print underneath the full-screen UI.
    logger.propagate = False

    if not debug:
        logger.setLevel(logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return None

    handler = DebugLogHandler()
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    return handler

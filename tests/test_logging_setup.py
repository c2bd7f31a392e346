"""Tests for logging configuration and the in-memory debug log."""

import logging

from gottodo.logging_setup import DebugLogHandler, setup_logging


def own_handlers(logger: logging.Logger) -> list:
    """Handlers installed by setup_logging (pytest adds capture handlers of its own)."""
    return [h for h in logger.handlers if isinstance(h, (DebugLogHandler, logging.NullHandler))]


def test_debug_off_installs_null_handler():
    assert setup_logging(debug=False) is None

    logger = logging.getLogger("gottodo")
    assert logger.propagate is False
    assert [type(h) for h in own_handlers(logger)] == [logging.NullHandler]


def test_debug_on_returns_handler(debug_log):
    logger = logging.getLogger("gottodo")

    assert isinstance(debug_log, DebugLogHandler)
    assert own_handlers(logger) == [debug_log]

    logging.getLogger("gottodo.tui.session").debug("Task %d toggled: done=%s", 0, True)
    assert list(debug_log.lines) == ["Task 0 toggled: done=True"]


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(debug=True)
    handler = setup_logging(debug=True)

    assert own_handlers(logging.getLogger("gottodo")) == [handler]
    setup_logging(debug=False)


def test_handler_evicts_oldest_first():
    handler = DebugLogHandler(capacity=3)
    logger = logging.getLogger("gottodo.test.evict")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        for i in range(5):
            logger.debug("msg %d", i)
    finally:
        logger.removeHandler(handler)

    assert list(handler.lines) == ["msg 2", "msg 3", "msg 4"]
    assert handler.tail(2) == ["msg 3", "msg 4"]
    assert handler.tail(0) == []

"""
FILE: gottodo/tui/loop.py
PURPOSE: Full-screen interactive loop: poll a key, update the session, redraw
EXPORTS:
  - run_app(debug) -> None
  - run_session(session, reader, console) -> None
DEPENDENCIES:
  - rich (Console, Live)
  - gottodo.core.store (load_tasks)
  - gottodo.tui.keys (KeyReader)
  - gottodo.tui.render (render_screen)
  - gottodo.logging_setup (setup_logging)
NOTES:
  - Single-threaded: waits up to POLL_INTERVAL for input, handles at
    most one key per iteration, then redraws
  - Live runs on the alternate screen with auto refresh off; every
    redraw is explicit
  - Terminal setup problems become TerminalError
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.live import Live

from ..core import store
from ..core.constants import POLL_INTERVAL
from ..core.exceptions import TerminalError
from ..logging_setup import setup_logging
from .keys import KeyReader
from .render import render_screen
from .session import Session


logger = logging.getLogger(__name__)


def run_session(session: Session, reader: KeyReader, console: Console) -> None:
    """
    Drive a session until the user quits.

    Args:
        session: State to display and mutate
        reader: Source of key presses
        console: Rich console to draw on
    """
    with Live(
        render_screen(session),
        console=console,
        screen=True,
        auto_refresh=False,
        transient=True,
    ) as live:
        while True:
            key = reader.poll(POLL_INTERVAL)
            if key is not None and not session.handle_key(key):
                break
            live.update(render_screen(session), refresh=True)


def run_app(debug: bool = False, console: Optional[Console] = None) -> None:
    """
    Entry point for the interactive task list.

    Args:
        debug: Show the debug log pane

    Raises:
        TerminalError: If the interactive display cannot be set up
    """
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise TerminalError("gottodo needs an interactive terminal (stdin/stdout is not a TTY)")

    debug_log = setup_logging(debug)
    if debug:
        logger.debug("Debug mode enabled")

    session = Session(tasks=store.load_tasks(), debug_log=debug_log)
    logger.debug("UI visible: %s", session.ui_visible)

    console = console or Console()

    try:
        reader = KeyReader()
    except (OSError, ValueError) as e:
        raise TerminalError(f"Could not open keyboard input: {e}") from e

    try:
        with reader.raw_mode():
            run_session(session, reader, console)
    except OSError as e:
        raise TerminalError(f"Terminal error: {e}") from e
    finally:
        reader.close()

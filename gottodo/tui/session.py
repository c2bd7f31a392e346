"""
FILE: gottodo/tui/session.py
PURPOSE: Session state and the keyboard-driven mode state machine
EXPORTS:
  - Normal, AddingTask, ConfirmingDelete, ShowingHelp (mode dataclasses)
  - Mode (union of the above)
  - Session (dataclass)
DEPENDENCIES:
  - gottodo.core.store (save_tasks)
  - gottodo.core.exceptions (StoreError)
  - gottodo.tui.keys (Key)
  - gottodo.logging_setup (DebugLogHandler)
NOTES:
  - One Session owns all per-run state; the loop passes it around
  - handle_key() returns False when the user quits
  - Every mutating action saves the whole list
  - Out-of-range actions are silent no-ops
  - A failed save keeps in-memory state and sets a status message
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..core import store
from ..core.constants import (
    KEY_ADD,
    KEY_DELETE,
    KEY_HELP,
    KEY_QUIT,
    KEY_TOGGLE_DONE,
    KEYS_CONFIRM_NO,
    KEYS_CONFIRM_YES,
)
from ..core.exceptions import StoreError
from ..core.models import Task
from ..logging_setup import DebugLogHandler
from . import keys
from .keys import Key


logger = logging.getLogger(__name__)


# --- Modes ---


@dataclass
class Normal:
    """Browsing the list."""


@dataclass
class AddingTask:
    """Typing the text of a new task."""
    buffer: str = ""


@dataclass
class ConfirmingDelete:
    """Waiting for y/n before deleting the selected task."""


@dataclass
class ShowingHelp:
    """Help overlay is open; any key closes it."""


Mode = Union[Normal, AddingTask, ConfirmingDelete, ShowingHelp]


def mode_name(mode: Mode) -> str:
    return type(mode).__name__


# --- Session ---


@dataclass
class Session:
    """
    All in-memory state of one interactive run.

    Attributes:
        tasks: The task list, in display order
        selected: Index of the highlighted task (0 when the list is empty)
        mode: Current interaction mode
        ui_visible: Whether the task list pane is shown
        debug_log: In-memory debug log (None unless --debug)
        status: Transient message shown until the next key press
    """
    tasks: List[Task] = field(default_factory=list)
    selected: int = 0
    mode: Mode = field(default_factory=Normal)
    ui_visible: bool = True
    debug_log: Optional[DebugLogHandler] = None
    status: Optional[str] = None

    def __post_init__(self):
        self.clamp_selection()

    # --- Helpers ---

    @property
    def selected_task(self) -> Optional[Task]:
        if 0 <= self.selected < len(self.tasks):
            return self.tasks[self.selected]
        return None

    def clamp_selection(self) -> None:
        """Keep the selection inside [0, len-1], or 0 for an empty list."""
        self.selected = max(0, min(self.selected, len(self.tasks) - 1))

    def save(self) -> None:
        """Persist the current task list; on failure set the status message."""
        try:
            store.save_tasks(self.tasks)
        except StoreError as e:
            logger.warning("Save failed: %s", e)
            self.status = f"Save failed: {e.reason}"

    # --- Input routing ---

    def handle_key(self, key: Key) -> bool:
        """
        Apply one key press to the session.

        Returns:
            True to keep running, False to quit
        """
        logger.debug("Key pressed: %s", key)
        self.status = None

        if isinstance(self.mode, Normal):
            return self._handle_normal(key)
        if isinstance(self.mode, AddingTask):
            self._handle_adding(self.mode, key)
        elif isinstance(self.mode, ConfirmingDelete):
            self._handle_confirm_delete(key)
        elif isinstance(self.mode, ShowingHelp):
            self.mode = Normal()
            logger.debug("Closed help")
        return True

    def _handle_normal(self, key: Key) -> bool:
        if key.is_char(KEY_QUIT):
            logger.debug("Quitting application")
            return False

        if key.name == keys.CTRL_SPACE:
            self.ui_visible = not self.ui_visible
            logger.debug("UI toggled: visible=%s", self.ui_visible)
        elif not self.ui_visible:
            logger.debug("Unhandled key in %s mode", mode_name(self.mode))
        elif key.is_char(KEY_TOGGLE_DONE):
            self.toggle_selected()
        elif key.is_char(KEY_ADD):
            self.mode = AddingTask()
            logger.debug("Entered task creation mode")
        elif key.is_char(KEY_DELETE) and self.tasks:
            self.mode = ConfirmingDelete()
            logger.debug("Entered delete confirmation mode")
        elif key.is_char(KEY_HELP):
            self.mode = ShowingHelp()
            logger.debug("Showing help")
        elif key.name == keys.DOWN:
            self.move_selection(1)
        elif key.name == keys.UP:
            self.move_selection(-1)
        else:
            logger.debug("Unhandled key in %s mode", mode_name(self.mode))

        return True

    def _handle_adding(self, mode: AddingTask, key: Key) -> None:
        if key.name == keys.ENTER:
            self.add_task(mode.buffer)
            self.mode = Normal()
        elif key.name == keys.ESCAPE:
            self.mode = Normal()
            logger.debug("Cancelled task creation")
        elif key.name == keys.BACKSPACE:
            mode.buffer = mode.buffer[:-1]
        elif key.name == keys.CHAR:
            mode.buffer += key.char
        else:
            logger.debug("Unhandled key in %s mode", mode_name(mode))

    def _handle_confirm_delete(self, key: Key) -> None:
        if key.is_char(*KEYS_CONFIRM_YES):
            self.delete_selected()
            self.mode = Normal()
        elif key.is_char(*KEYS_CONFIRM_NO) or key.name == keys.ESCAPE:
            self.mode = Normal()
            logger.debug("Cancelled task deletion")
        else:
            logger.debug("Unhandled key in %s mode", mode_name(self.mode))

    # --- Actions ---

    def move_selection(self, step: int) -> None:
        """Move the selection by `step`, stopping at either end of the list."""
        old = self.selected
        self.selected += step
        self.clamp_selection()
        if self.selected != old:
            direction = "down" if step > 0 else "up"
            logger.debug("Selection moved %s: %d -> %d", direction, old, self.selected)

    def toggle_selected(self) -> None:
        task = self.selected_task
        if task is None:
            return
        done = task.toggle()
        self.save()
        logger.debug("Task %d toggled: done=%s", self.selected, done)

    def add_task(self, text: str) -> None:
        """Append a task with the trimmed text; blank input adds nothing."""
        text = text.strip()
        if not text:
            return
        self.tasks.append(Task(text=text, done=False))
        self.save()
        logger.debug("Added task: '%s'", text)

    def delete_selected(self) -> None:
        if self.selected_task is None:
            return
        removed = self.tasks.pop(self.selected)
        self.clamp_selection()
        self.save()
        logger.debug("Deleted task: '%s'", removed.text)

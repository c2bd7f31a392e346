"""
FILE: gottodo/tui/keys.py
PURPOSE: Keyboard input: raw key presses to logical keys, non-blocking polling
EXPORTS:
  - Key (dataclass)
  - from_key_press(key_press) -> Key
  - KeyReader (class)
DEPENDENCIES:
  - prompt_toolkit (cross-platform raw-mode input and key parsing)
NOTES:
  - Session code only ever sees Key, never prompt_toolkit types
  - Ctrl+Space arrives as NUL, which prompt_toolkit reports as ControlAt
  - A lone Esc is held by the VT100 parser until flush_keys(); flushed
    keys wait ESCAPE_TIMEOUT in case the rest of a sequence follows
  - Keys read in one burst are queued and handed out one per poll
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.input.vt100_parser import Vt100Parser
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from ..core.constants import ESCAPE_TIMEOUT, POLL_STEP


# Logical key names
CHAR = "char"
UP = "up"
DOWN = "down"
ENTER = "enter"
ESCAPE = "escape"
BACKSPACE = "backspace"
CTRL_SPACE = "ctrl-space"
OTHER = "other"

_SPECIAL_KEYS = {
    Keys.Up: UP,
    Keys.Down: DOWN,
    Keys.ControlM: ENTER,
    Keys.ControlJ: ENTER,
    Keys.Escape: ESCAPE,
    Keys.ControlH: BACKSPACE,
    Keys.ControlAt: CTRL_SPACE,
}


@dataclass(frozen=True)
class Key:
    """
    A single key press, reduced to what the session cares about.

    Attributes:
        name: Logical key name (CHAR, UP, DOWN, ENTER, ...)
        char: The typed character when name is CHAR, else ""
        raw: Original key identifier, kept for the debug log
    """
    name: str
    char: str = ""
    raw: str = ""

    def is_char(self, *chars: str) -> bool:
        return self.name == CHAR and self.char in chars

    def __str__(self) -> str:
        if self.name == CHAR:
            return f"Char({self.char!r})"
        return self.name


def from_key_press(key_press: KeyPress) -> Key:
    """Translate a prompt_toolkit KeyPress into a Key."""
    key = key_press.key

    if isinstance(key, Keys):
        name = _SPECIAL_KEYS.get(key, OTHER)
        return Key(name=name, raw=key.value)

    if len(key) == 1 and key.isprintable():
        return Key(name=CHAR, char=key, raw=key)

    return Key(name=OTHER, raw=key)


def _reparse(presses: List[KeyPress]) -> Tuple[List[KeyPress], List[KeyPress]]:
    """
    Run the raw data of some key presses through a fresh VT100 parser.

    Returns:
        (complete key presses, trailing presses of an unfinished sequence)
    """
    out: List[KeyPress] = []
    parser = Vt100Parser(out.append)
    parser.feed("".join(p.data for p in presses))
    complete = len(out)
    parser.flush()
    return out[:complete], out[complete:]


class KeyReader:
    """
    Non-blocking keyboard reader on top of a prompt_toolkit Input.

    Keys flushed out of an unfinished escape sequence are held for
    ESCAPE_TIMEOUT seconds. If more input arrives in that window the
    two halves are parsed together, so an arrow key split across reads
    still arrives as one key.

    Usage:
        reader = KeyReader()
        with reader.raw_mode():
            key = reader.poll(0.2)
    """

    def __init__(self, input_: Optional[Input] = None):
        self._input = input_ if input_ is not None else create_input()
        self._pending: Deque[Key] = deque()
        self._held: List[KeyPress] = []
        self._held_at = 0.0

    def raw_mode(self):
        """Context manager putting the terminal in raw mode."""
        return self._input.raw_mode()

    def poll(self, timeout: float) -> Optional[Key]:
        """
        Wait up to `timeout` seconds for a key.

        Returns:
            The next key, or None if nothing was pressed in time
        """
        deadline = time.monotonic() + timeout

        while not self._pending:
            self._read()
            if self._pending:
                break

            if time.monotonic() >= deadline:
                return None
            time.sleep(POLL_STEP)

        return self._pending.popleft()

    def _read(self) -> None:
        presses = list(self._input.read_keys())
        now = time.monotonic()

        if self._held:
            if presses:
                presses, held = _reparse(self._held + presses)
                self._hold(held, now)
            elif now - self._held_at >= ESCAPE_TIMEOUT:
                presses, self._held = self._held, []
        elif not presses:
            self._hold(self._input.flush_keys(), now)

        self._pending.extend(from_key_press(p) for p in presses)

    def _hold(self, presses: List[KeyPress], now: float) -> None:
        self._held = list(presses)
        self._held_at = now

    def close(self) -> None:
        self._input.close()

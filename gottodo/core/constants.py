"""
FILE: gottodo/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - TASKS_FILE: Default location of the persisted task list
  - POLL_INTERVAL: Seconds to wait for a key before redrawing
  - DEBUG_LOG_CAPACITY / DEBUG_PANE_LINES: Debug log sizing
  - Layout sizes and key bindings
DEPENDENCIES:
  - pathlib (stdlib)
NOTES:
  - Centralized constants to avoid magic strings
  - Store path is relative to the working directory
"""

from pathlib import Path

# Persistence
TASKS_FILE = Path("todos.json")

# Interactive loop
POLL_INTERVAL = 0.2
POLL_STEP = 0.01
ESCAPE_TIMEOUT = 0.05

# Debug log
DEBUG_LOG_CAPACITY = 20
DEBUG_PANE_LINES = 6

# Layout (rows / columns)
MAIN_MIN_ROWS = 8
MAIN_MIN_ROWS_WITH_DEBUG = 10
PROMPT_ROWS = 3
STATUS_ROWS = 1
DEBUG_ROWS = 8
SPACER_MIN_COLUMNS = 60
TASK_LIST_COLUMNS = 30

# Key bindings (Normal mode)
KEY_QUIT = "q"
KEY_TOGGLE_DONE = " "
KEY_ADD = "a"
KEY_DELETE = "d"
KEY_HELP = "h"

# Key bindings (ConfirmingDelete mode)
KEYS_CONFIRM_YES = ("y", "Y")
KEYS_CONFIRM_NO = ("n", "N")

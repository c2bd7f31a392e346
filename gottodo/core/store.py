"""
FILE: gottodo/core/store.py
PURPOSE: Load and save the task list as a JSON file
EXPORTS:
  - load_tasks(path) -> List[Task]
  - save_tasks(tasks, path) -> None
DEPENDENCIES:
  - json (stdlib)
  - pathlib (stdlib)
  - gottodo.core.models (Task)
  - gottodo.core.exceptions (StoreError)
NOTES:
  - File stored at ./todos.json (TASKS_PATH)
  - Whole-list reads and writes, no incremental updates
  - Any read failure yields an empty list; missing file is created empty
  - Write failures raise StoreError
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from .constants import TASKS_FILE
from .exceptions import StoreError
from .models import Task


logger = logging.getLogger(__name__)

# Resolved at call time so tests can monkeypatch it
TASKS_PATH = TASKS_FILE


def _resolve(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else Path(TASKS_PATH)


def load_tasks(path: Optional[Path] = None) -> List[Task]:
    """
    Load the task list from disk.

    Args:
        path: File to read (defaults to TASKS_PATH)

    Returns:
        Tasks in stored order, or an empty list if the file is missing,
        unreadable, not valid JSON, nested too deeply to decode, or not
        a list of {text, done} records.

    Note:
        A missing file is created empty. Content is never repaired:
        one bad record discards the whole list.
    """
    path = _resolve(path)

    if not path.exists():
        try:
            path.touch()
        except OSError as e:
            logger.debug("Could not create %s: %s", path, e)
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError, RecursionError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return []

    if not isinstance(data, list):
        logger.debug("Ignoring %s: top level is not a list", path)
        return []

    try:
        return [Task.from_dict(item) for item in data]
    except ValueError as e:
        logger.debug("Ignoring %s: %s", path, e)
        return []


def save_tasks(tasks: List[Task], path: Optional[Path] = None) -> None:
    """
    Overwrite the stored task list with the given tasks.

    Raises:
        StoreError: If the file cannot be written
    """
    path = _resolve(path)
    payload = json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as e:
        raise StoreError(path, e.strerror or str(e)) from e

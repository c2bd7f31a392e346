"""
FILE: gottodo/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - GottodoError (base exception)
  - StoreError
  - TerminalError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from GottodoError for easy catching
  - Read failures never raise: the store substitutes an empty list
  - StoreError is surfaced in the UI, TerminalError aborts startup
"""

from pathlib import Path


class GottodoError(Exception):
    """Base exception for all gottodo errors."""
    pass


class StoreError(GottodoError):
    """Task list could not be written to disk."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not save {path}: {reason}")


class TerminalError(GottodoError):
    """Interactive display could not be set up."""

    def __init__(self, message: str):
        super().__init__(message)

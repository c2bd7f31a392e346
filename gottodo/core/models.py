"""
FILE: gottodo/core/models.py
PURPOSE: Domain model for a single to-do entry
EXPORTS:
  - Task (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
NOTES:
  - A task has no id: its identity is its position in the list
  - from_dict() is strict and raises ValueError on malformed records
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class Task:
    """A to-do entry with text and a completion flag."""

    text: str
    done: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Build a Task from a decoded JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        text = data.get("text")
        done = data.get("done")
        if not isinstance(text, str) or not isinstance(done, bool):
            raise ValueError(f"invalid task record: {data!r}")

        return cls(text=text, done=done)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def toggle(self) -> bool:
        """Flip the done flag and return the new value."""
        self.done = not self.done
        return self.done

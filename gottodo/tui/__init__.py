"""
FILE: gottodo/tui/__init__.py
PURPOSE: Full-screen keyboard-driven task list
EXPORTS:
  - run_app() (from tui.loop)
DEPENDENCIES:
  - prompt_toolkit (raw keyboard input)
  - rich (screen rendering)
NOTES:
  - Entry point for interactive mode
"""

from .loop import run_app

__all__ = ["run_app"]

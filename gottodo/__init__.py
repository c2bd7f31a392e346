"""gottodo - a minimal terminal task list."""

__version__ = "0.1.0"

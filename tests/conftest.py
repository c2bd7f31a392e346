"""Shared pytest configuration and fixtures for tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gottodo.core import store
from gottodo.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def temp_store(monkeypatch, tmp_path):
    """Use a temporary task file for all tests."""
    tasks_path = tmp_path / "todos.json"
    monkeypatch.setattr(store, "TASKS_PATH", tasks_path)
    yield tasks_path


@pytest.fixture
def debug_log():
    """Debug log attached to the package logger for one test."""
    handler = setup_logging(debug=True)
    yield handler
    setup_logging(debug=False)

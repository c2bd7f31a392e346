"""
Tests for screen composition.

Rendering is checked by printing the layout into a recording console
and reading back the plain text.
"""

import io

from rich.console import Console

from gottodo.core.models import Task
from gottodo.logging_setup import DebugLogHandler
from gottodo.tui.render import render_screen, render_task_list
from gottodo.tui.session import AddingTask, ConfirmingDelete, Session, ShowingHelp


def screen_text(session: Session, width: int = 100, height: int = 30) -> str:
    console = Console(file=io.StringIO(), width=width, height=height, record=True)
    console.print(render_screen(session))
    return console.export_text()


def section_names(session: Session) -> list:
    return [child.name for child in render_screen(session).children]


def make_debug_log(*lines: str) -> DebugLogHandler:
    handler = DebugLogHandler()
    handler.lines.extend(lines)
    return handler


def test_normal_mode_shows_task_list():
    session = Session(tasks=[Task("buy milk"), Task("call mom", done=True)])

    text = screen_text(session)

    assert "TODO (h=help)" in text
    assert "[ ] buy milk" in text
    assert "[x] call mom" in text
    assert "Prompt" not in text
    assert section_names(session) == ["main"]


def test_task_list_sits_in_right_column():
    session = Session(tasks=[Task("buy milk")])

    main = render_screen(session)["main"]

    assert [child.name for child in main.children] == ["spacer", "tasks"]
    assert main["tasks"].size == 30
    assert main["spacer"].size is None


def test_selected_row_is_highlighted():
    session = Session(tasks=[Task("a"), Task("b"), Task("c")], selected=1)

    items = render_task_list(session).renderable
    highlighted = [span for span in items.spans if span.style == "on blue"]

    assert len(highlighted) == 1
    assert items.plain[highlighted[0].start:highlighted[0].end] == "[ ] b"


def test_empty_list_renders():
    text = screen_text(Session())

    assert "TODO (h=help)" in text


def test_adding_mode_shows_prompt():
    session = Session(tasks=[Task("a")], mode=AddingTask(buffer="hello [world]"))

    text = screen_text(session)

    assert "Add task: hello [world]" in text
    assert "TODO (h=help)" not in text
    assert "TODO" in text
    assert section_names(session) == ["main", "prompt"]


def test_confirm_delete_shows_task_text():
    session = Session(tasks=[Task("a"), Task("bread")], selected=1, mode=ConfirmingDelete())

    assert "Delete 'bread' ? (y/n)" in screen_text(session)


def test_confirm_delete_without_task():
    session = Session(mode=ConfirmingDelete())

    assert "No task to delete" in screen_text(session)


def test_help_replaces_task_list():
    session = Session(tasks=[Task("secret")], mode=ShowingHelp())

    text = screen_text(session)

    assert "Keyboard Shortcuts" in text
    assert "Press any key to close this help..." in text
    assert "secret" not in text
    assert section_names(session) == ["main"]


def test_hidden_list_leaves_main_pane_blank():
    session = Session(tasks=[Task("secret")], ui_visible=False, debug_log=make_debug_log("hello"))

    text = screen_text(session)

    assert "secret" not in text
    assert "TODO" not in text
    assert "Debug Log" in text
    assert "hello" in text


def test_debug_pane_shows_newest_six_lines():
    debug_log = make_debug_log(*[f"line {i:02d}" for i in range(10)])
    session = Session(tasks=[Task("a")], debug_log=debug_log)

    text = screen_text(session)

    assert "Debug Log" in text
    assert "line 03" not in text
    for i in range(4, 10):
        assert f"line {i:02d}" in text


def test_pane_order_with_prompt_status_and_debug():
    session = Session(
        tasks=[Task("a")],
        mode=AddingTask(),
        debug_log=make_debug_log(),
        status="Save failed: disk full",
    )

    assert section_names(session) == ["main", "prompt", "status", "debug"]
    assert "Save failed: disk full" in screen_text(session)


def test_rendering_does_not_mutate_session():
    session = Session(tasks=[Task("a"), Task("b", True)], selected=1, mode=AddingTask(buffer="x"))
    before = repr(session)

    render_screen(session)
    screen_text(session)

    assert repr(session) == before

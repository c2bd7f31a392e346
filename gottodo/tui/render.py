"""
FILE: gottodo/tui/render.py
PURPOSE: Build the full-screen layout from session state
EXPORTS:
  - render_screen(session) -> Layout
  - render_task_list(session) -> Panel
  - render_prompt(session) -> Panel | None
  - render_help() -> Panel
  - render_debug(debug_log) -> Panel
DEPENDENCIES:
  - rich (Layout, Panel, Text)
  - gottodo.tui.session (Session, modes)
NOTES:
  - Pure functions: nothing here mutates the session
  - Top to bottom: main pane, prompt (adding/deleting), status, debug
  - The list sits in a fixed-width column on the right; the wider
    left column stays empty
  - Task text goes through Text objects, never markup, so "[x]"
    and user input are shown literally
"""

from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from ..core.constants import (
    DEBUG_PANE_LINES,
    DEBUG_ROWS,
    MAIN_MIN_ROWS,
    MAIN_MIN_ROWS_WITH_DEBUG,
    PROMPT_ROWS,
    SPACER_MIN_COLUMNS,
    STATUS_ROWS,
    TASK_LIST_COLUMNS,
)
from ..logging_setup import DebugLogHandler
from .session import AddingTask, ConfirmingDelete, Normal, Session, ShowingHelp


HELP_TEXT = """GOTTODO - Keyboard Shortcuts

Navigation:
• ↑/↓        Navigate tasks
• Space      Toggle task completion
• q          Quit application

Task Management:
• a          Add new task
• d          Delete selected task

Interface:
• Ctrl+Space Hide/show todo list
• h          Show/hide this help
• Esc        Close help or cancel action

Press any key to close this help..."""


def render_task_list(session: Session) -> Panel:
    """Task list panel with the selected row highlighted."""
    items = Text(no_wrap=True, overflow="ellipsis")

    for i, task in enumerate(session.tasks):
        prefix = "[x]" if task.done else "[ ]"
        style = "on blue" if i == session.selected else ""
        if i:
            items.append("\n")
        items.append(f"{prefix} {task.text}", style=style)

    title = "TODO (h=help)" if isinstance(session.mode, Normal) else "TODO"
    return Panel(items, title=title, title_align="left")


def render_prompt(session: Session):
    """Prompt panel for add/delete modes, None otherwise."""
    mode = session.mode

    if isinstance(mode, AddingTask):
        text = Text(f"Add task: {mode.buffer}")
    elif isinstance(mode, ConfirmingDelete):
        task = session.selected_task
        if task is not None:
            text = Text(f"Delete '{task.text}' ? (y/n)")
        else:
            text = Text("No task to delete")
    else:
        return None

    return Panel(text, title="Prompt", title_align="left")


def render_help() -> Panel:
    return Panel(Text(HELP_TEXT), title="Help", title_align="left")


def render_debug(debug_log: DebugLogHandler) -> Panel:
    """Debug pane showing the newest few log lines."""
    text = Text("\n".join(debug_log.tail(DEBUG_PANE_LINES)))
    return Panel(text, title="Debug Log", title_align="left")


def _render_main(session: Session) -> Layout:
    if isinstance(session.mode, ShowingHelp):
        return Layout(render_help(), name="main")

    if not session.ui_visible:
        return Layout(Text(""), name="main")

    main = Layout(name="main")
    main.split_row(
        Layout(Text(""), name="spacer", minimum_size=SPACER_MIN_COLUMNS),
        Layout(render_task_list(session), name="tasks", size=TASK_LIST_COLUMNS),
    )
    return main


def render_screen(session: Session) -> Layout:
    """
    Compose the whole screen for the current session state.

    Args:
        session: Session to draw (read only)

    Returns:
        Rich Layout filling the terminal
    """
    main = _render_main(session)
    prompt = render_prompt(session)

    if session.debug_log is not None and prompt is None:
        main.minimum_size = MAIN_MIN_ROWS_WITH_DEBUG
    else:
        main.minimum_size = MAIN_MIN_ROWS
    sections = [main]

    if prompt is not None:
        sections.append(Layout(prompt, name="prompt", size=PROMPT_ROWS))

    if session.status:
        status = Text(session.status, style="bold red", no_wrap=True, overflow="ellipsis")
        sections.append(Layout(status, name="status", size=STATUS_ROWS))

    if session.debug_log is not None:
        sections.append(Layout(render_debug(session.debug_log), name="debug", size=DEBUG_ROWS))

    screen = Layout(name="screen")
    screen.split_column(*sections)
    return screen

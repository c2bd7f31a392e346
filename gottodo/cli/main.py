"""
FILE: gottodo/cli/main.py
PURPOSE: Typer-based command line entry point
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - run() - Launch the interactive task list
DEPENDENCIES:
  - typer (CLI framework)
  - rich (error output)
  - gottodo.tui (interactive mode)
  - gottodo.core.exceptions (error handling)
NOTES:
  - Single command with one flag: --debug
  - Error messages go to stderr
  - Exit codes: 0=normal quit, 1=terminal setup failure
"""

import typer
from rich.console import Console
from rich.markup import escape

from ..core.exceptions import GottodoError

# Typer app setup
app = typer.Typer(
    name="gottodo",
    help="Minimal terminal task list",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)


@app.command()
def run(
    debug: bool = typer.Option(False, "--debug", help="Show the debug log pane"),
):
    """
    Open the task list (todos.json in the current directory).

    Keys: ↑/↓ navigate, Space toggle, a add, d delete, h help,
    Ctrl+Space hide/show list, q quit.
    """
    # Import here so --help stays fast
    from ..tui import run_app

    try:
        run_app(debug=debug, console=console)
    except GottodoError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)


def main():
    """Main entry point for CLI."""
    app(prog_name="gottodo")


if __name__ == "__main__":
    main()

"""Rich console output and logging setup for the repokit CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# stdout for results, stderr for diagnostics
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def configure_logging(verbose: bool = False) -> None:
    """Route repokit log records through Rich on stderr.

    WARNING by default so audit records for destructive actions are
    always shown; DEBUG with --verbose.
    """
    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    root = logging.getLogger("repokit")
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_error(message: str) -> None:
    """Print a fatal diagnostic to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

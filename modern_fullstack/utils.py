"""Shared utility functions for create-modern-fullstack.

Provides async command execution and the Rich-based console helpers that the
CLI and the generator use to report progress.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and wait for it to exit.

    The child inherits the parent's standard streams, so its output goes
    straight to the terminal.  There is no timeout.

    Args:
        cmd: Argument list; the first item is the executable.
        cwd: Working directory for the child process.

    Returns:
        The process exit code.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str = "") -> None:
    """Print the welcome panel shown before scaffolding starts."""
    body = f"[bold]{title}[/bold]"
    if subtitle:
        body += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(body, border_style="bright_cyan", expand=False))
    console.print()


def print_summary_table(
    rows: list[tuple[str, ...]] | dict[str, str],
    title: str = "Summary",
    columns: tuple[str, ...] = ("Item", "Value"),
) -> None:
    """Print a summary table.

    Args:
        rows: Either a ``{label: value}`` mapping or a list of row tuples
            matching *columns*.
        title: Table title.
        columns: Column headers.  The first column is rendered dim.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="dim" if index == 0 else "", no_wrap=index == 0)

    items = rows.items() if isinstance(rows, dict) else rows
    for row in items:
        table.add_row(*(str(cell) for cell in row))

    console.print(table)
    console.print()


def print_step(message: str) -> None:
    """Print a cyan progress line."""
    console.print(f"[cyan]{escape(message)}[/cyan]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")

"""Rich console helpers for the CLI."""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_status(text: str, style: str = "green") -> None:
    """Print a status line with a colored bullet."""
    console.print(f"  [{style}]●[/{style}] {escape(text)}")


def print_error(text: str) -> None:
    err_console.print(f"  [bold red]✗ {escape(text)}[/bold red]")

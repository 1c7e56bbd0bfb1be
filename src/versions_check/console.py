"""Shared Rich console for versions-check CLI output."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()


def error(message: str, console: Console = console) -> None:
    """Print an error message in red."""
    console.print(f"[red bold]{message}[/red bold]")


def success(message: str, console: Console = console) -> None:
    """Print a success message in green."""
    console.print(f"[green]{message}[/green]")


def warning(message: str, console: Console = console) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]{message}[/yellow]")


def failure_panel(title: str, entries: list[str], console: Console = console) -> None:
    """Print every offending entry of a failed check in one red panel."""
    body = "\n".join(entries) if entries else "(no details)"
    console.print(Panel(Text(body), title=f"[red bold]{title}[/red bold]", border_style="red", expand=False))

"""Rich display helpers for formatted quantities."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


def print_results(title: str, rows: Iterable[Tuple[str, str]]):
    """Print raw values next to their display strings."""
    table = Table(
        title=title,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Raw", justify="right", style="dim", min_width=12)
    table.add_column("Display", justify="right", style="bold cyan", min_width=8)

    for raw, shown in rows:
        table.add_row(raw, shown)

    console.print(table)
    console.print()


def print_status(title: str, fields: List[Tuple[str, str]]):
    """Print labelled, already-formatted metrics as a status panel."""
    width = max((len(label) for label, _ in fields), default=0)
    lines = [f"[dim]{label.rjust(width)}:[/dim] [bold]{value}[/bold]" for label, value in fields]
    console.print(
        Panel(
            "\n".join(lines),
            title=f"[bold cyan]{title}[/bold cyan]",
            border_style="cyan",
            padding=(0, 2),
        )
    )
    console.print()


def print_error(msg: str):
    """Print an error line."""
    console.print(f"[red]❌ {escape(msg)}[/red]")

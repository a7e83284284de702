"""Progress reporting utilities using Rich."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from tracksplit.models.track import TrackDatabase

console = Console(stderr=True)


def log(message: str, *, style: str = "bold") -> None:
    """Log a timestamped message."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(f"[dim]\\[{ts}][/dim] {message}", style=style, highlight=False)


def log_step(step: str, message: str) -> None:
    """Log a processing step."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(
        f"[dim]\\[{ts}][/dim] [bold cyan]{step}[/bold cyan] {message}",
        highlight=False,
    )


def log_success(message: str) -> None:
    """Log a success message."""
    log(f"[green]✓[/green] {message}", style="")


def log_warning(message: str) -> None:
    """Log a warning message."""
    log(f"[yellow]⚠[/yellow] {message}", style="")


def log_error(message: str) -> None:
    """Log an error message."""
    log(f"[red]✗[/red] {message}", style="")


def show_run_summary(title: str, duration_seconds: float, details: dict) -> None:
    """Show a summary panel for a completed run."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()

    for key, value in details.items():
        table.add_row(key, str(value))

    mins = int(duration_seconds) // 60
    secs = int(duration_seconds) % 60
    table.add_row("Duration", f"{mins}m{secs:02d}s")

    console.print(Panel(table, title=f"[bold]{title}[/bold]", border_style="green"))


def show_section_table(db: TrackDatabase) -> None:
    """Print one row per section: track count, first/last track and span."""
    table = Table(title="Label database")
    table.add_column("Section", justify="right")
    table.add_column("Tracks", justify="right")
    table.add_column("First")
    table.add_column("Last")
    table.add_column("Start")
    table.add_column("End")

    for section in db.sections():
        records = db.tracks_in_section(section)
        table.add_row(
            str(section),
            str(len(records)),
            f"{records[0].track_number:03d}",
            f"{records[-1].track_number:03d}",
            records[0].start_position,
            records[-1].end_position,
        )

    console.print(table)

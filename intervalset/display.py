"""Rich terminal display helpers for the interactive shell."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from intervalset.interval import Interval

_console = Console()

MENU_ITEMS = [
    "Add interval",
    "Delete interval",
    "Query point",
    "Query range",
    "Display all intervals",
    "Clear all intervals",
    "Exit",
]


def display_menu(title: str, console: Console | None = None) -> None:
    """Print the numbered menu.

    Args:
        title: Heading shown above the menu.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"\n[bold]=== {title} ===[/bold]")
    for number, label in enumerate(MENU_ITEMS, start=1):
        c.print(f"{number}. {label}")


def display_success(message: str, console: Console | None = None) -> None:
    c = console or _console
    c.print(f"[green]{message}[/green]")


def display_declined(message: str, console: Console | None = None) -> None:
    """Print a message for an operation the interval set declined.

    Args:
        message: Human-readable reason.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"[yellow]{message}[/yellow]")


def display_error(message: str, console: Console | None = None) -> None:
    """Print an input or usage error in red.

    Args:
        message: Error description.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"[bold red]Error:[/bold red] {escape(message)}")


def display_intervals(intervals: list[Interval], console: Console | None = None) -> None:
    """Print stored intervals as a table, or a notice when there are none.

    Args:
        intervals: Canonical intervals in display order.
        console: Optional console override for tests.
    """
    c = console or _console
    if not intervals:
        c.print("No intervals stored.")
        return

    table = Table(title="Stored intervals")
    table.add_column("#", justify="right")
    table.add_column("Interval")
    table.add_column("Length", justify="right")
    for idx, interval in enumerate(intervals, start=1):
        table.add_row(str(idx), str(interval), str(interval.length))
    c.print(table)

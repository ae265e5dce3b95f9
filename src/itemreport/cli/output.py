"""
Rich terminal output helpers for CLI.

Provides functions for printing tables and status messages using the
Rich library.
"""

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from itemreport.core.models import Item, Number, User
from itemreport.reports.formatters import format_number

# Console instances: reports and tables go to stdout, problems to stderr
console = Console()
err_console = Console(stderr=True)


def print_items_table(user: User, items: Sequence[Item], total: Number) -> None:
    """Print the items visible to a user as a table.

    Args:
        user: User the items were filtered for.
        items: Visible items, in display order.
        total: Total over ``items``.
    """
    table = Table(
        title=f"Items visible to {user.name} ({user.role})",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Priority", justify="center")

    for item in items:
        priority = Text("yes", style="bold red") if item.priority else Text("-", style="dim")
        table.add_row(
            str(item.id),
            item.name,
            Text(format_number(item.value), style="bold" if item.priority else ""),
            priority,
        )

    console.print()
    console.print(table)
    console.print()
    console.print(f"[bold]Total:[/] {format_number(total)} ({len(items)} items)")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[bold yellow]Warning:[/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[cyan]Info:[/] {escape(message)}")

"""Helpers shared by the CLI command modules."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from tradejournal.config import CONFIG_PATH, get_config, get_journal_path
from tradejournal.db.store import JournalData, JournalFileError, JournalStore

console = Console()


def data_option(func):
    """Add the ``--data`` option overriding the configured journal file."""
    return click.option(
        "--data",
        "data_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Journal JSON file (overrides journal.path in config).",
    )(func)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error panel."""
    console.print(Panel(
        message,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def get_store(data_path: Optional[Path], config: dict) -> JournalStore:
    """Get the journal store for the given or configured path."""
    return JournalStore(data_path or get_journal_path(config))


def load_journal(data_path: Optional[Path]) -> tuple[JournalData, dict]:
    """Load config and the journal file, exiting with an error panel on failure.

    Returns:
        Tuple of (journal data, config).
    """
    config = get_config()
    store = get_store(data_path, config)

    try:
        data = store.load()
    except JournalFileError as e:
        print_error(
            f"[red]{e}[/red]\n\n"
            f"Pass [cyan]--data PATH[/cyan] or set [cyan]journal.path[/cyan] in "
            f"[cyan]{CONFIG_PATH}[/cyan].",
            title="Journal Error",
        )
        raise SystemExit(1)

    return data, config


def format_currency(amount: float, currency: str = "₹") -> str:
    """Format an amount with sign and currency symbol."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):,.2f}"


def pnl_markup(amount: float, currency: str = "₹") -> str:
    """Format an amount colored green for gains and red for losses."""
    color = "green" if amount >= 0 else "red"
    sign = "+" if amount > 0 else ""
    return f"[{color}]{sign}{format_currency(amount, currency)}[/{color}]"


def no_data(title: str, message: str) -> None:
    """Print a dimmed panel for an empty report."""
    console.print(Panel(
        f"[dim]{message}[/dim]",
        title=f"[bold]{title}[/bold]",
        border_style="dim",
    ))

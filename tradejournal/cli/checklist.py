"""Checklist commands for the trade journal CLI.

Handles listing, adding, updating and removing trading checklist items.
"""

from pathlib import Path
from typing import Optional

import click
from rich.table import Table

from tradejournal.checklist import (
    add_checklist_item,
    default_checklist_items,
    delete_checklist_item,
    split_by_category,
    update_checklist_item,
)
from tradejournal.cli.common import console, data_option, get_store, load_journal, print_error
from tradejournal.config import get_config
from tradejournal.db.store import JournalFileError
from tradejournal.models import CATEGORIES, ChecklistItem


def _load_items(data_path: Optional[Path]) -> list[ChecklistItem]:
    """Load checklist items, starting from the defaults for a new journal file."""
    store = get_store(data_path, get_config())
    if not store.path.exists():
        return default_checklist_items()
    data, _ = load_journal(data_path)
    return list(data.checklist_items)


def _save_items(data_path: Optional[Path], items: list[ChecklistItem]) -> None:
    store = get_store(data_path, get_config())
    try:
        store.save_checklist_items(items)
    except JournalFileError as e:
        print_error(f"[red]{e}[/red]", title="Journal Error")
        raise SystemExit(1)


@click.group()
def checklist() -> None:
    """Manage the trading discipline checklist.

    \b
    Examples:
      tradejournal checklist list
      tradejournal checklist add "Waited for candle close" --category pre-trade
      tradejournal checklist remove market-trend
    """


@checklist.command("list")
@data_option
def list_items(data_path: Optional[Path]) -> None:
    """List checklist items by category."""
    items = _load_items(data_path)
    pre_trade, post_trade = split_by_category(items)

    for title, group in (("Pre-Trade Checklist", pre_trade), ("Post-Trade Checklist", post_trade)):
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="bold")
        table.add_column("Description")

        for item in group:
            table.add_row(item.id, item.name, item.description or "-")

        if not group:
            table.add_row("-", "[dim]No items[/dim]", "-")

        console.print(table)


@checklist.command("add")
@data_option
@click.argument("name")
@click.option(
    "--category",
    type=click.Choice(CATEGORIES),
    default="pre-trade",
    show_default=True,
    help="Checklist category.",
)
@click.option("--description", default=None, help="Optional description.")
def add_item(data_path: Optional[Path], name: str, category: str, description: Optional[str]) -> None:
    """Add a checklist item."""
    items = add_checklist_item(_load_items(data_path), name, category, description)
    _save_items(data_path, items)
    console.print(f"[green]✓[/green] Added [bold]{name}[/bold] [dim]({items[-1].id})[/dim]")


@checklist.command("remove")
@data_option
@click.argument("item_id")
def remove_item(data_path: Optional[Path], item_id: str) -> None:
    """Remove a checklist item by id.

    Adherence already recorded on trades is kept.
    """
    items = _load_items(data_path)
    remaining = delete_checklist_item(items, item_id)

    if len(remaining) == len(items):
        print_error(f"[red]No checklist item with id '{item_id}'[/red]")
        raise SystemExit(1)

    _save_items(data_path, remaining)
    console.print(f"[green]✓[/green] Removed [bold]{item_id}[/bold]")


@checklist.command("update")
@data_option
@click.argument("item_id")
@click.option("--name", default=None, help="New name.")
@click.option("--category", type=click.Choice(CATEGORIES), default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
def update_item(
    data_path: Optional[Path],
    item_id: str,
    name: Optional[str],
    category: Optional[str],
    description: Optional[str],
) -> None:
    """Update a checklist item's name, category or description."""
    items = _load_items(data_path)
    if not any(item.id == item_id for item in items):
        print_error(f"[red]No checklist item with id '{item_id}'[/red]")
        raise SystemExit(1)

    changes = {
        key: value
        for key, value in (("name", name), ("category", category), ("description", description))
        if value is not None
    }
    _save_items(data_path, update_checklist_item(items, item_id, **changes))
    console.print(f"[green]✓[/green] Updated [bold]{item_id}[/bold]")

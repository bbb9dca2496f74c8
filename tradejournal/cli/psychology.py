"""Psychology review command for the trade journal CLI."""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics import daily_review, reconcile_daily_pnl
from tradejournal.cli.common import console, data_option, load_journal, pnl_markup

DATE_FORMAT = click.DateTime(formats=["%Y-%m-%d"])


@click.command()
@data_option
@click.option("--date", "review_date", type=DATE_FORMAT, default=None, help="Day to review (YYYY-MM-DD).")
def review(data_path: Optional[Path], review_date: Optional[datetime]) -> None:
    """Review a trading day alongside your psychology entries.

    Shows the day's P&L with its best and worst trade, then compares
    the P&L declared in each psychology entry with the journal's trades.

    \b
    Examples:
      tradejournal review
      tradejournal review --date 2024-03-08
    """
    data, config = load_journal(data_path)
    currency = config["display"]["currency"]
    day = review_date.date() if review_date else date.today()

    result = daily_review(data.trades, day)
    best = result["best_trade"]
    worst = result["worst_trade"]

    text = (
        f"[bold]Trades:[/bold] {len(result['trades'])}\n"
        f"[bold]P&L:[/bold] {pnl_markup(result['total_pnl'], currency)}"
    )
    if best is not None:
        text += f"\n[bold]Best trade:[/bold] {best.stock_name} {pnl_markup(best.pnl, currency)}"
    if worst is not None:
        text += f"\n[bold]Worst trade:[/bold] {worst.stock_name} {pnl_markup(worst.pnl, currency)}"

    console.print(Panel(
        text,
        title=f"[bold cyan]Review {day.strftime('%Y-%m-%d')}[/bold cyan]",
        border_style="cyan",
    ))

    rows = reconcile_daily_pnl(data.psychology_entries, data.trades)
    if not rows:
        console.print("\n[dim]No psychology entries found[/dim]")
        return

    table = Table(title="Psychology Entries", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Declared P&L", justify="right")
    table.add_column("Trade P&L", justify="right")
    table.add_column("Difference", justify="right")

    for row in rows:
        declared = row["declared_pnl"]
        difference = row["difference"]
        table.add_row(
            row["date"].strftime("%Y-%m-%d"),
            pnl_markup(declared, currency) if declared is not None else "-",
            pnl_markup(row["computed_pnl"], currency),
            pnl_markup(difference, currency) if difference is not None else "-",
        )

    console.print(table)

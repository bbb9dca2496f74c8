"""Discipline command for the trade journal CLI.

Correlates checklist adherence with trading performance.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics import (
    adherence_distribution,
    annotate_trades,
    checklist_item_analysis,
    discipline_summary,
    filter_by_time_range,
    get_active_strategy_trades,
    performance_by_adherence_level,
    top_impact_items,
)
from tradejournal.analytics.filters import TIME_RANGES
from tradejournal.cli.common import console, data_option, load_journal, no_data, pnl_markup

DATE_FORMAT = click.DateTime(formats=["%Y-%m-%d"])


@click.command()
@data_option
@click.option(
    "--range",
    "time_range",
    type=click.Choice(TIME_RANGES),
    default="all",
    show_default=True,
    help="Time range of trades to analyse.",
)
@click.option("--start", type=DATE_FORMAT, default=None, help="Start date for --range custom.")
@click.option("--end", type=DATE_FORMAT, default=None, help="End date for --range custom.")
@click.option("--as-of", "as_of", type=DATE_FORMAT, default=None, help="Reference date for rolling ranges.")
def discipline(
    data_path: Optional[Path],
    time_range: str,
    start: Optional[datetime],
    end: Optional[datetime],
    as_of: Optional[datetime],
) -> None:
    """Display checklist adherence against performance.

    Shows performance per adherence level, the distribution of
    adherence, and which checklist items make the most difference.

    \b
    Examples:
      tradejournal discipline
      tradejournal discipline --range 30d
      tradejournal discipline --range custom --start 2024-01-01 --end 2024-03-31
    """
    data, config = load_journal(data_path)
    currency = config["display"]["currency"]
    top_items = int(config["display"]["top_items"])

    if not data.checklist_items:
        no_data(
            "Trading Discipline",
            "No trading checklist configured. Add items with: tradejournal checklist add",
        )
        return

    trades = get_active_strategy_trades(data.trades, data.strategies)
    trades = filter_by_time_range(
        trades,
        time_range,
        today=as_of.date() if as_of else date.today(),
        start=start.date() if start else None,
        end=end.date() if end else None,
    )
    annotated = annotate_trades(trades)

    # Summary
    summary = discipline_summary(annotated)
    console.print(Panel(
        f"Average Adherence: [bold]{summary['avg_adherence']:.1f}%[/bold] "
        f"({summary['avg_level'].value})\n"
        f"High Adherence P&L: {pnl_markup(summary['high_adherence_pnl'], currency)} "
        f"[dim]{summary['high_adherence_trades']} trades (≥75%)[/dim]\n"
        f"Low Adherence P&L:  {pnl_markup(summary['low_adherence_pnl'], currency)} "
        f"[dim]{summary['low_adherence_trades']} trades (<50%)[/dim]\n"
        f"Discipline Impact:  {pnl_markup(summary['pnl_impact'], currency)} "
        f"[dim]{summary['win_rate_impact']:+.1f}% win rate diff[/dim]",
        title="[bold cyan]Trading Discipline[/bold cyan]",
        border_style="cyan",
    ))

    # Performance by adherence level
    levels = performance_by_adherence_level(annotated)
    if not levels:
        no_data("Checklist Adherence vs Performance", "No checklist data available")
        return

    table = Table(title="Checklist Adherence vs Performance", show_header=True, header_style="bold cyan")
    table.add_column("Level", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("Total P&L", justify="right")
    table.add_column("Avg P&L", justify="right")
    table.add_column("Win Rate", justify="right")

    for row in levels:
        table.add_row(
            row.level.value,
            str(row.trades),
            pnl_markup(row.total_pnl, currency),
            pnl_markup(row.avg_pnl, currency),
            f"{row.win_rate:.1f}%",
        )
    console.print(table)

    # Distribution
    distribution = Table(title="Adherence Distribution", show_header=True, header_style="bold cyan")
    distribution.add_column("Level", style="bold")
    distribution.add_column("Trades", justify="right")
    distribution.add_column("Share", justify="right")
    for share in adherence_distribution(annotated):
        distribution.add_row(share.level.value, str(share.trades), f"{share.percentage:.1f}%")
    console.print(distribution)

    # Item impact
    analysis = checklist_item_analysis(annotated, data.checklist_items)
    if not analysis:
        no_data("Checklist Item Impact", "No individual item data available")
        return

    items_table = Table(title="Checklist Item Impact", show_header=True, header_style="bold cyan")
    items_table.add_column("Item", style="bold", max_width=36)
    items_table.add_column("Category")
    items_table.add_column("Followed", justify="right")
    items_table.add_column("Skipped", justify="right")
    items_table.add_column("Avg P&L (F)", justify="right")
    items_table.add_column("Avg P&L (S)", justify="right")
    items_table.add_column("Impact", justify="right")
    items_table.add_column("Win Rate Δ", justify="right")

    for row in analysis:
        items_table.add_row(
            row.item,
            row.category,
            str(row.followed_trades),
            str(row.not_followed_trades),
            pnl_markup(row.followed_pnl, currency),
            pnl_markup(row.not_followed_pnl, currency),
            pnl_markup(row.impact, currency),
            f"{row.win_rate_impact:+.1f}%",
        )
    console.print(items_table)

    top_lines = [
        f"{rank}. {row.item}: {pnl_markup(row.impact, currency)}"
        for rank, row in enumerate(top_impact_items(analysis, limit=top_items), start=1)
    ]
    console.print(Panel(
        "\n".join(top_lines),
        title="[bold]Top Impact Items[/bold]",
        border_style="cyan",
    ))

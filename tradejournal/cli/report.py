"""Performance report commands.

Handles quick stats, daily P&L, trade frequency, risk-reward and mood.
All reports except quick stats only count trades of active strategies.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics import (
    DAILY_WINDOW,
    WEEKLY_WINDOW,
    calculate_pnl_from_trades,
    calculate_quick_stats,
    daily_mood,
    daily_pnl,
    frequency_summary,
    get_active_strategy_trades,
    mood_performance,
    risk_reward_analysis,
    risk_reward_summary,
    weekly_frequency,
)
from tradejournal.cli.common import (
    console,
    data_option,
    format_currency,
    load_journal,
    no_data,
    pnl_markup,
)

DATE_FORMAT = click.DateTime(formats=["%Y-%m-%d"])


@click.command()
@data_option
@click.option("--as-of", "as_of", type=DATE_FORMAT, default=None, help="Reference date (YYYY-MM-DD).")
def stats(data_path: Optional[Path], as_of: Optional[datetime]) -> None:
    """Display quick stats for the journal.

    Shows strategy ranking, trade size, monthly activity and progress
    towards the monthly P&L target.

    \b
    Examples:
      tradejournal stats
      tradejournal stats --as-of 2024-03-31
    """
    data, config = load_journal(data_path)
    currency = config["display"]["currency"]
    today = as_of.date() if as_of else date.today()

    quick = calculate_quick_stats(
        data.trades,
        data.strategies,
        today,
        monthly_target=float(config["targets"]["monthly_pnl"]),
    )
    summary = calculate_pnl_from_trades(get_active_strategy_trades(data.trades, data.strategies))

    table = Table(title="Quick Stats", show_header=False)
    table.add_column("Stat", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Realized P&L", pnl_markup(summary["realized_pnl"], currency))
    table.add_row("Trades", str(summary["total_trades"]))
    table.add_row("Win Rate", f"{summary['win_rate']:.1f}%")
    table.add_row("Avg Win", format_currency(summary["avg_win"], currency))
    table.add_row("Avg Loss", format_currency(summary["avg_loss"], currency))
    table.add_row("Avg Trade Size", format_currency(quick["avg_trade_size"], currency))
    table.add_row("Best Strategy", f"[green]{quick['best_strategy'] or 'None'}[/green]")
    table.add_row("Worst Strategy", f"[red]{quick['worst_strategy'] or 'None'}[/red]")
    table.add_row("Active Strategies", str(quick["active_strategies"]))
    table.add_row("Testing Strategies", f"[yellow]{quick['testing_strategies']}[/yellow]")
    table.add_row("Trading Days", f"{quick['trading_days_this_month']}/22")
    table.add_row("Monthly P&L", pnl_markup(quick["monthly_pnl"], currency))
    table.add_row("Target Progress", f"{quick['target_progress']:.1f}%")

    console.print(table)


@click.command()
@data_option
@click.option("--days", default=DAILY_WINDOW, show_default=True, help="Number of trading days to show.")
def pnl(data_path: Optional[Path], days: int) -> None:
    """Display daily P&L for recent trading days.

    \b
    Examples:
      tradejournal pnl
      tradejournal pnl --days 10
    """
    data, config = load_journal(data_path)
    currency = config["display"]["currency"]

    rows = daily_pnl(get_active_strategy_trades(data.trades, data.strategies), window=days)
    if not rows:
        no_data("Daily P&L", "No trades found")
        return

    table = Table(title="Daily P&L", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("P&L", justify="right")

    for row in rows:
        table.add_row(row.date.strftime("%Y-%m-%d"), str(row.trades), pnl_markup(row.pnl, currency))

    console.print(table)
    total = sum(row.pnl for row in rows)
    console.print(f"\n[bold]Total P&L:[/bold] {pnl_markup(total, currency)}")


@click.command()
@data_option
@click.option("--weeks", default=WEEKLY_WINDOW, show_default=True, help="Number of weeks to show.")
def frequency(data_path: Optional[Path], weeks: int) -> None:
    """Display weekly trade frequency and volume.

    Weeks start on Sunday.

    \b
    Examples:
      tradejournal frequency
      tradejournal frequency --weeks 4
    """
    data, config = load_journal(data_path)
    currency = config["display"]["currency"]

    rows = weekly_frequency(get_active_strategy_trades(data.trades, data.strategies), window=weeks)
    if not rows:
        no_data("Trade Frequency", "No trades found")
        return

    table = Table(title="Trade Frequency", show_header=True, header_style="bold cyan")
    table.add_column("Week of", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Avg P&L", justify="right")

    for row in rows:
        table.add_row(
            row.week_start.strftime("%Y-%m-%d"),
            str(row.trades),
            format_currency(row.total_volume, currency),
            pnl_markup(row.avg_pnl, currency),
        )

    console.print(table)

    summary = frequency_summary(rows)
    console.print(
        f"\n[dim]Avg trades/week: {summary['avg_trades_per_week']:.1f} | "
        f"Total volume: {format_currency(summary['total_volume'], currency)} | "
        f"Active weeks: {summary['active_week_pct']:.0f}%[/dim]"
    )


@click.command()
@data_option
def risk(data_path: Optional[Path]) -> None:
    """Display risk vs reward for trades with a stop loss.

    Only trades with entry, exit and stop-loss prices are shown.

    \b
    Examples:
      tradejournal risk
    """
    data, config = load_journal(data_path)
    currency = config["display"]["currency"]

    rows = risk_reward_analysis(get_active_strategy_trades(data.trades, data.strategies))
    if not rows:
        no_data("Risk vs Reward", "No risk-reward data available. Add trades with stop loss.")
        return

    table = Table(title="Risk vs Reward", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Stock")
    table.add_column("Risk", justify="right")
    table.add_column("Reward", justify="right")
    table.add_column("R:R", justify="right")
    table.add_column("P&L", justify="right")

    for row in rows:
        table.add_row(
            row.trade_date.strftime("%Y-%m-%d"),
            row.stock_name,
            format_currency(row.risk, currency),
            format_currency(row.reward, currency),
            f"{row.ratio:.2f}:1",
            pnl_markup(row.pnl, currency),
        )

    console.print(table)

    summary = risk_reward_summary(rows)
    console.print(Panel(
        f"Avg R:R: [bold]{summary['avg_ratio']:.2f}:1[/bold]\n"
        f"Best R:R: [bold]{summary['best_ratio']:.2f}:1[/bold]\n"
        f"Trades with R:R > 1: [bold]{summary['favorable_trades']}[/bold] of {summary['count']}",
        title="[bold cyan]Summary[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@data_option
@click.option("--days", default=DAILY_WINDOW, show_default=True, help="Number of trading days to show.")
def mood(data_path: Optional[Path], days: int) -> None:
    """Display daily mood against P&L.

    Mood is the average emotion score (1-5) of the day's trades.

    \b
    Examples:
      tradejournal mood
    """
    data, config = load_journal(data_path)
    currency = config["display"]["currency"]

    active_trades = get_active_strategy_trades(data.trades, data.strategies)
    rows = daily_mood(active_trades, window=days)
    if not rows:
        no_data("Mood Tracker", "No trades found")
        return

    table = Table(title="Mood Tracker", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Mood")
    table.add_column("Score", justify="right")
    table.add_column("Trades", justify="right")
    table.add_column("P&L", justify="right")

    for row in rows:
        table.add_row(
            row.day.strftime("%Y-%m-%d"),
            row.mood_label,
            f"{row.mood_score:.1f}/5",
            str(row.trades),
            pnl_markup(row.pnl, currency),
        )

    console.print(table)

    by_mood = Table(title="Performance by Mood", show_header=True, header_style="bold cyan")
    by_mood.add_column("Mood", style="bold")
    by_mood.add_column("Trades", justify="right")
    by_mood.add_column("Total P&L", justify="right")
    by_mood.add_column("Win Rate", justify="right")

    for row in mood_performance(active_trades):
        by_mood.add_row(
            row["mood"],
            str(row["trades"]),
            pnl_markup(row["total_pnl"], currency),
            f"{row['win_rate']:.1f}%",
        )

    console.print(by_mood)

"""Main CLI entry point for the trade journal.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import importlib
import logging

import click
from rich.console import Console

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group whose subcommands are imported on first use.

    Subcommands are registered as ``"package.module:attribute"`` strings
    and swapped for the loaded command once resolved.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to ``module:attribute`` targets.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = dict(lazy_subcommands or {})

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted({*super().list_commands(ctx), *self._lazy_subcommands})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        target = self._lazy_subcommands.get(cmd_name)
        if target is not None:
            self.add_command(_resolve_command(cmd_name, target))
            del self._lazy_subcommands[cmd_name]
        return super().get_command(ctx, cmd_name)


def _resolve_command(cmd_name: str, target: str) -> click.Command:
    """Import ``module:attribute`` and check that it is a click command."""
    module_path, _, attr_name = target.partition(":")
    command = getattr(importlib.import_module(module_path), attr_name or cmd_name, None)
    if not isinstance(command, click.Command):
        raise click.ClickException(f"No click command '{cmd_name}' at {target}")
    return command


# Command name -> "module:attribute"
LAZY_SUBCOMMANDS = {
    "stats": "tradejournal.cli.report:stats",
    "pnl": "tradejournal.cli.report:pnl",
    "frequency": "tradejournal.cli.report:frequency",
    "risk": "tradejournal.cli.report:risk",
    "mood": "tradejournal.cli.report:mood",
    "discipline": "tradejournal.cli.discipline:discipline",
    "review": "tradejournal.cli.psychology:review",
    "checklist": "tradejournal.cli.checklist:checklist",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tradejournal")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Trade Journal - analytics for your trading journal.

    Reads a JSON journal export of trades, strategies, checklist items
    and psychology entries, and reports P&L, discipline and mood metrics.

    \b
    Quick Start:
      tradejournal init                  # Create a config file
      tradejournal stats --data j.json   # Quick stats
      tradejournal discipline            # Checklist adherence vs P&L
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)


@cli.command()
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Create a config file with the default settings.

    \b
    Examples:
      tradejournal init
      tradejournal init --force
    """
    from rich.panel import Panel

    from tradejournal.config import CONFIG_PATH, create_template_config

    if CONFIG_PATH.exists() and not force:
        console.print(Panel(
            f"Config already exists at [cyan]{CONFIG_PATH}[/cyan]\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Config[/bold yellow]",
            border_style="yellow",
        ))
        return

    path = create_template_config()
    console.print(Panel(
        f"Config written to [cyan]{path}[/cyan]\n\n"
        "Edit [cyan]journal.path[/cyan] to point at your journal export.",
        title="[bold green]Config[/bold green]",
        border_style="green",
    ))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

"""CLI commands for the trade journal.

This package renders the analytics engine's aggregates as rich tables
from a JSON journal export.
"""

from tradejournal.cli.main import cli, main

__all__ = ["cli", "main"]

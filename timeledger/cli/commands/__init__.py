"""CLI commands."""

from timeledger.cli.commands.export import export_ledger
from timeledger.cli.commands.feed import show_feed
from timeledger.cli.commands.report import show_report
from timeledger.cli.commands.validate import validate_data

__all__ = ["export_ledger", "show_feed", "show_report", "validate_data"]

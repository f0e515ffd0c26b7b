"""TimeLedger CLI.

This module provides a command-line interface for the time ledger.
It includes commands for the activity feed, yearly reports, ledger
exports and snapshot validation.
"""

import click

from timeledger.cli.commands.export import export_ledger
from timeledger.cli.commands.feed import show_feed
from timeledger.cli.commands.report import show_report
from timeledger.cli.commands.validate import validate_data

from timeledger import __version__


@click.group(help="TimeLedger CLI - Group tracked time and report billable amounts")
@click.version_option(version=__version__)
def cli():
    """TimeLedger CLI main entry point."""
    pass


# Register commands
cli.add_command(show_feed)
cli.add_command(show_report)
cli.add_command(export_ledger)
cli.add_command(validate_data)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

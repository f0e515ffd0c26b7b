"""Shared option handling for CLI commands."""

import datetime as dt
import logging
from pathlib import Path
from typing import Optional, Sequence

import click

from timeledger.cli.error_handlers import ConfigurationError, SnapshotLoadError
from timeledger.cli.utils.formatters import format_warning
from timeledger.config import get_config
from timeledger.config.logging_config import LoggingConfig, configure_logging
from timeledger.config.settings import TimeLedgerConfig
from timeledger.models.filters import ALL_CLIENTS, FilterCriteria, InvoiceStatus
from timeledger.models.settings import WorkspaceSettings
from timeledger.models.snapshot import WorkspaceSnapshot
from timeledger.readers.snapshot_reader import SnapshotReader

logger = logging.getLogger(__name__)

INVOICE_STATUS_CHOICES = [status.value for status in InvoiceStatus]


def snapshot_option(f):
    """Add the --snapshot option to a command."""
    return click.option(
        "--snapshot",
        "snapshot_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Snapshot JSON file (default: SNAPSHOT_FILE setting)",
    )(f)


def debug_option(f):
    """Add the --debug option to a command."""
    return click.option(
        "--debug", is_flag=True, help="Enable debug logging and full stack traces"
    )(f)


def filter_options(f):
    """Add the year, client, project and invoice status options to a command."""
    options = [
        click.option(
            "--year",
            type=click.IntRange(1, 9999),
            default=None,
            help="Calendar year (default: current year)",
        ),
        click.option(
            "--client",
            default=ALL_CLIENTS,
            show_default=True,
            help='Client id or name, "all", or "no-client"',
        ),
        click.option(
            "--project",
            "project_ids",
            multiple=True,
            help="Project id to include (repeatable, default: all available)",
        ),
        click.option(
            "--invoice-status",
            type=click.Choice(INVOICE_STATUS_CHOICES),
            default=InvoiceStatus.ALL.value,
            show_default=True,
            help="Invoice status filter",
        ),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def setup(debug: bool) -> TimeLedgerConfig:
    """Load the configuration and configure logging for a command run.

    Args:
        debug: Force DEBUG level logging

    Returns:
        The loaded configuration

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        config = get_config()
    except ValueError as e:
        raise ConfigurationError(
            str(e), "Check the values in your environment or .env file"
        ) from e

    log_level = "DEBUG" if debug or config.debug else config.log_level
    configure_logging(LoggingConfig.from_env(log_level))
    logger.debug(f"Loaded {config.environment} configuration")
    return config


def resolve_snapshot_path(
    config: TimeLedgerConfig, snapshot_path: Optional[Path]
) -> Path:
    """Get the snapshot named on the command line or in the configuration.

    Raises:
        SnapshotLoadError: If the file does not exist
    """
    path = snapshot_path or config.snapshot_file
    if not path.exists():
        raise SnapshotLoadError(
            f"Snapshot file not found: {path}",
            "Pass --snapshot or set SNAPSHOT_FILE",
        )
    return path


def load_snapshot(
    config: TimeLedgerConfig, snapshot_path: Optional[Path]
) -> WorkspaceSnapshot:
    """Read the snapshot, skipping invalid records with a console warning."""
    reader = SnapshotReader()
    snapshot = reader.read(resolve_snapshot_path(config, snapshot_path))
    if reader.report.issues:
        click.echo(
            format_warning(
                f"Skipped invalid records ({reader.report.summary()}); "
                "run validate-data for details"
            )
        )
    return snapshot


def build_criteria(
    year: Optional[int],
    client: str,
    project_ids: Sequence[str],
    invoice_status: str,
) -> FilterCriteria:
    """Build filter criteria from command options.

    No --project option means every project available under the client.
    """
    return FilterCriteria(
        year=year or dt.date.today().year,
        client=client,
        project_ids=frozenset(project_ids) if project_ids else None,
        invoice_status=InvoiceStatus(invoice_status),
    )


def display_settings(
    config: TimeLedgerConfig, snapshot: WorkspaceSnapshot
) -> WorkspaceSettings:
    """Get the currency settings: the snapshot's own, else the configured ones."""
    if snapshot.has_settings:
        return snapshot.settings
    return config.get_workspace_settings()

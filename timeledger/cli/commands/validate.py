"""Validate command for checking snapshot consistency."""

import click

from timeledger.cli.error_handlers import DataValidationError, with_error_handling
from timeledger.cli.utils.formatters import format_success, format_warning
from timeledger.cli.utils.loading import (
    debug_option,
    resolve_snapshot_path,
    setup,
    snapshot_option,
)
from timeledger.readers.snapshot_reader import SnapshotReader
from timeledger.validators.snapshot_validator import SnapshotValidator


@click.command(name="validate-data")
@snapshot_option
@debug_option
def validate_data(snapshot_path, debug):
    """
    Validate a snapshot without generating reports.

    Reports records that fail to parse, duplicate ids, dangling project
    references, malformed clock times and client name mismatches.

    Examples:

        \b
        timeledger validate-data --snapshot snapshot.json
    """
    with with_error_handling(debug):
        config = setup(debug)
        reader = SnapshotReader()
        snapshot = reader.read(resolve_snapshot_path(config, snapshot_path))
        report = reader.report
        report.merge(SnapshotValidator().validate(snapshot))

        click.echo(report.format())
        if report.has_errors():
            raise DataValidationError(
                report.summary(), "Fix the listed records and run validate-data again"
            )
        if report.warning_count:
            click.echo(format_warning(report.summary()))
        else:
            click.echo(format_success("Snapshot is valid"))

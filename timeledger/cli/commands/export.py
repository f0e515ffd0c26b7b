"""Export command for the plain-text ledger."""

from pathlib import Path

import click

from timeledger.cli.error_handlers import ProcessingError, with_error_handling
from timeledger.cli.utils.formatters import format_success
from timeledger.cli.utils.loading import (
    build_criteria,
    debug_option,
    filter_options,
    load_snapshot,
    setup,
    snapshot_option,
)
from timeledger.writers.ledger_exporter import LedgerExporter


@click.command(name="export")
@snapshot_option
@filter_options
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: EXPORT_DIR/Report_<year>_<client>_<status>.txt)",
)
@debug_option
def export_ledger(snapshot_path, year, client, project_ids, invoice_status, output, debug):
    """
    Export the filtered time entries as a text ledger.

    Examples:

        \b
        # Everything for 2024 into the export directory
        timeledger export --year 2024

        \b
        # Invoiced work of one client into a given file
        timeledger export --client c1 --invoice-status invoiced --output acme.txt
    """
    with with_error_handling(debug):
        config = setup(debug)
        snapshot = load_snapshot(config, snapshot_path)
        criteria = build_criteria(year, client, project_ids, invoice_status)

        exporter = LedgerExporter()
        target = output or config.export_dir / exporter.export_filename(criteria)
        try:
            written = exporter.write(target, snapshot, criteria)
        except OSError as e:
            raise ProcessingError(
                f"Could not write {target}: {e}",
                "Check that the output directory is writable",
            ) from e

        click.echo(format_success(f"Ledger written to {written}"))

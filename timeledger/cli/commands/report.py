"""Report command for the yearly monthly report."""

import click

from timeledger.aggregators.chart_scaler import ChartScaler
from timeledger.aggregators.legend_summarizer import LegendSummarizer
from timeledger.aggregators.monthly_aggregator import MonthlyAggregator
from timeledger.cli.error_handlers import with_error_handling
from timeledger.cli.utils.formatters import (
    format_dataframe,
    format_info,
    format_table,
)
from timeledger.cli.utils.loading import (
    build_criteria,
    debug_option,
    display_settings,
    filter_options,
    load_snapshot,
    setup,
    snapshot_option,
)
from timeledger.models.cost_item import CostCategory
from timeledger.writers.display import format_currency, format_hours_clock

CHART_WIDTH = 40

AMOUNT_COLUMNS = ["Hours Amount", "Licenses", "Servers", "Domains", "Total"]


@click.command(name="report")
@snapshot_option
@filter_options
@click.option("--chart/--no-chart", default=True, help="Show the monthly hours chart")
@debug_option
def show_report(snapshot_path, year, client, project_ids, invoice_status, chart, debug):
    """
    Show monthly hours and amounts for a year.

    Examples:

        \b
        # Current year, all clients
        timeledger report

        \b
        # One client's uninvoiced work in 2024
        timeledger report --year 2024 --client c1 --invoice-status not-invoiced
    """
    with with_error_handling(debug):
        config = setup(debug)
        snapshot = load_snapshot(config, snapshot_path)
        settings = display_settings(config, snapshot)
        criteria = build_criteria(year, client, project_ids, invoice_status)

        aggregator = MonthlyAggregator()
        report = aggregator.aggregate(snapshot, criteria)
        client_name = aggregator.filter_resolver.client_filter_name(
            snapshot.clients, criteria.client
        )

        click.echo(
            format_info(
                f"Report {report.year} - {client_name} - "
                f"{report.invoice_status.label} - "
                f"{len(report.active_project_ids)} of "
                f"{len(report.available_projects)} project(s)"
            )
        )
        click.echo("")

        def money(value) -> str:
            return format_currency(value, settings)

        click.echo(
            format_dataframe(
                report.to_dataframe(),
                formatters={column: money for column in AMOUNT_COLUMNS},
            )
        )
        click.echo("")

        totals = [
            [
                "Hours",
                f"{report.grand_total_hours} "
                f"({format_hours_clock(report.grand_total_hours)})",
            ],
            ["Hours Amount", money(report.hours_amount_total)],
        ]
        totals.extend(
            [category.value.capitalize(), money(report.category_total(category))]
            for category in CostCategory
        )
        totals.append(["Grand Total", money(report.grand_total_amount)])
        click.echo(format_table(["Year Totals", "Value"], totals))

        if chart:
            click.echo("")
            for column in ChartScaler().scale(report.monthly_data):
                bar = "#" * round(column.fraction * CHART_WIDTH)
                click.echo(
                    f"{column.month_start.strftime('%b')} "
                    f"{bar:<{CHART_WIDTH}} {column.total_hours}h"
                )

        legend = LegendSummarizer().summarize(
            aggregator.filter_entries(snapshot, criteria), snapshot.projects
        )
        if legend:
            click.echo("")
            click.echo(
                format_table(
                    ["Project", "Hours"],
                    [[item.name, item.total_hours] for item in legend],
                )
            )

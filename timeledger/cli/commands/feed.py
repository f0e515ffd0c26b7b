"""Feed command for the week and day activity feed."""

import datetime as dt

import click

from timeledger.aggregators.week_grouper import WeekDayGrouper
from timeledger.calculators.time_utils import calculate_entry_minutes
from timeledger.cli.error_handlers import with_error_handling
from timeledger.cli.utils.formatters import format_info
from timeledger.cli.utils.loading import (
    debug_option,
    load_snapshot,
    setup,
    snapshot_option,
)
from timeledger.writers.display import day_label, format_clock_duration, week_label


@click.command(name="feed")
@snapshot_option
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date for the headings (YYYY-MM-DD, default: today)",
)
@click.option(
    "--weeks",
    type=click.IntRange(min=1),
    default=None,
    help="Show only the most recent N weeks",
)
@debug_option
def show_feed(snapshot_path, today, weeks, debug):
    """
    Show time entries grouped by week and day, most recent first.

    Examples:

        \b
        # Whole feed
        timeledger feed --snapshot snapshot.json

        \b
        # Last two weeks, as seen on a given day
        timeledger feed --today 2024-05-03 --weeks 2
    """
    with with_error_handling(debug):
        config = setup(debug)
        snapshot = load_snapshot(config, snapshot_path)
        reference = today.date() if today else dt.date.today()
        project_names = {p.id: p.name for p in snapshot.projects}

        weeks_list = WeekDayGrouper().group(snapshot.entries)
        if weeks:
            weeks_list = weeks_list[:weeks]

        if not weeks_list:
            click.echo(format_info("No time entries found"))
            return

        for week in weeks_list:
            click.echo(
                click.style(
                    f"{week_label(week, reference)}  "
                    f"[{format_clock_duration(week.total_minutes)}]",
                    bold=True,
                )
            )
            for day in week.days:
                click.echo(
                    f"  {day_label(day.date, reference)}  "
                    f"[{format_clock_duration(day.total_minutes)}]"
                )
                for entry in day.entries:
                    project = project_names.get(entry.project, "Unknown project")
                    line = (
                        f"    {entry.start_time} - {entry.end_time}  "
                        f"{format_clock_duration(calculate_entry_minutes(entry))}  "
                        f"{project}"
                    )
                    if entry.description:
                        line += f"  {entry.description}"
                    click.echo(line)
            click.echo("")

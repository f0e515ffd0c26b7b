"""Flat-text ledger export of time entries.

The ledger groups the year and filter scoped entries by client and
project, lists them chronologically, and closes every project with a
subtotal and the document with a grand total. Downstream tools parse the
text by its markers, so labels and separators must stay exactly as they
are. Every entry line ends with a space followed by the invoice marker,
which is empty for entries that are not invoiced.
"""

import datetime as dt
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from timeledger.calculators.time_utils import (
    calculate_entry_minutes,
    minutes_to_decimal_hours,
)
from timeledger.filters.filter_resolver import FilterResolver
from timeledger.filters.record_filters import filter_time_entries
from timeledger.models.filters import ALL_CLIENTS, FilterCriteria
from timeledger.models.project import Project
from timeledger.models.snapshot import WorkspaceSnapshot
from timeledger.models.time_entry import TimeEntry
from timeledger.utils.logging_utils import LogContext, log_function_call

logger = logging.getLogger(__name__)

SECTION_RULE = "=" * 65
CLIENT_RULE = "-" * 65
INVOICED_MARKER = "[INVOICED]"
NO_CLIENT_LABEL = "No Client / Internal"

DATE_FORMAT = "%d/%m/%Y"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"

LedgerGroups = Dict[str, Dict[str, List[TimeEntry]]]


class LedgerExporter:
    """Serializes filtered time entries into the flat-text ledger.

    Example:
        >>> exporter = LedgerExporter()
        >>> text = exporter.export(snapshot, FilterCriteria(year=2024))
        >>> text.splitlines()[0]
        'REPORT EXPORT - 2024'
    """

    def __init__(self, filter_resolver: Optional[FilterResolver] = None):
        """Initialize the exporter.

        Args:
            filter_resolver: Resolver for the project selection
        """
        self.filter_resolver = filter_resolver or FilterResolver()

    def select_entries(
        self, snapshot: WorkspaceSnapshot, criteria: FilterCriteria
    ) -> List[TimeEntry]:
        """Get the entries to export, sorted ascending by date.

        Args:
            snapshot: Workspace snapshot
            criteria: Filter criteria

        Returns:
            Matching entries, oldest first (ties keep snapshot order)
        """
        resolved = self.filter_resolver.resolve(
            snapshot.projects, snapshot.clients, criteria.client, criteria.project_ids
        )
        entries = filter_time_entries(
            snapshot.entries,
            criteria.year,
            resolved.active_project_ids,
            criteria.invoice_status,
        )
        return sorted(entries, key=lambda entry: entry.date)

    def group_entries(
        self, entries: Sequence[TimeEntry], projects: Sequence[Project]
    ) -> LedgerGroups:
        """Group entries by client name, then project name.

        Entries whose project is not in the catalog cannot be placed and
        are left out.

        Args:
            entries: Entries in output order
            projects: Project catalog

        Returns:
            Mapping of client name to project name to entries
        """
        catalog = {project.id: project for project in projects}
        groups: LedgerGroups = {}

        for entry in entries:
            project = catalog.get(entry.project)
            if project is None:
                logger.warning(
                    f"Excluding entry {entry.id} from export: "
                    f"unknown project {entry.project}"
                )
                continue
            client_name = project.client or NO_CLIENT_LABEL
            groups.setdefault(client_name, {}).setdefault(project.name, []).append(
                entry
            )

        return groups

    @log_function_call
    def export(
        self,
        snapshot: WorkspaceSnapshot,
        criteria: FilterCriteria,
        generated_at: Optional[dt.datetime] = None,
    ) -> str:
        """Build the ledger text.

        Args:
            snapshot: Workspace snapshot
            criteria: Filter criteria, also used for the header
            generated_at: Generation timestamp (default: now)

        Returns:
            The complete ledger document
        """
        generated_at = generated_at or dt.datetime.now()

        with LogContext(year=criteria.year, client_filter=criteria.client):
            entries = self.select_entries(snapshot, criteria)
            groups = self.group_entries(entries, snapshot.projects)
            client_filter_name = self.filter_resolver.client_filter_name(
                snapshot.clients, criteria.client
            )

            lines = [
                f"REPORT EXPORT - {criteria.year}",
                f"Client Filter: {client_filter_name}",
                f"Billing Status: {criteria.invoice_status.label}",
                f"Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}",
                SECTION_RULE,
                "",
            ]

            grand_total_minutes = 0
            for client_name in sorted(groups):
                lines.append(f"CLIENT: {client_name}")
                lines.append(CLIENT_RULE)

                client_projects = groups[client_name]
                for project_name in sorted(client_projects):
                    project_minutes = 0
                    lines.append(f"  PROJECT: {project_name}")
                    for entry in client_projects[project_name]:
                        minutes = calculate_entry_minutes(entry)
                        project_minutes += minutes
                        lines.append(self.format_entry_line(entry, minutes))
                    lines.append(
                        f"    >>> TOTAL PROJECT: "
                        f"{minutes_to_decimal_hours(project_minutes):.2f} hours"
                    )
                    lines.append("")
                    grand_total_minutes += project_minutes

                lines.append("")

            lines.append(SECTION_RULE)
            lines.append(
                f"GRAND TOTAL: {minutes_to_decimal_hours(grand_total_minutes):.2f} hours"
            )

            logger.info(
                f"Exported {sum(len(p) for c in groups.values() for p in c.values())} "
                f"entries across {len(groups)} client(s)"
            )
            return "\n".join(lines) + "\n"

    @staticmethod
    def format_entry_line(entry: TimeEntry, minutes: int) -> str:
        """Format one ledger line.

        Example:
            >>> LedgerExporter.format_entry_line(entry, 120)
            '    10/03/2024 | 09:00 - 11:00 | 2.00h - Homepage [INVOICED]'
        """
        line = (
            f"    {entry.date.strftime(DATE_FORMAT)} | "
            f"{entry.start_time} - {entry.end_time} | "
            f"{minutes_to_decimal_hours(minutes):.2f}h"
        )
        if entry.description:
            line += f" - {entry.description}"
        marker = INVOICED_MARKER if entry.invoiced else ""
        return f"{line} {marker}"

    @staticmethod
    def export_filename(criteria: FilterCriteria) -> str:
        """Default file name of an export.

        Example:
            >>> LedgerExporter.export_filename(FilterCriteria(year=2024))
            'Report_2024_All_all.txt'
        """
        client_part = "All" if criteria.client == ALL_CLIENTS else criteria.client
        return f"Report_{criteria.year}_{client_part}_{criteria.invoice_status.value}.txt"

    def write(
        self,
        path: Union[str, Path],
        snapshot: WorkspaceSnapshot,
        criteria: FilterCriteria,
        generated_at: Optional[dt.datetime] = None,
    ) -> Path:
        """Export the ledger and write it to a UTF-8 text file.

        Args:
            path: Target file path (parent directories are created)
            snapshot: Workspace snapshot
            criteria: Filter criteria
            generated_at: Generation timestamp (default: now)

        Returns:
            The written path
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            self.export(snapshot, criteria, generated_at=generated_at), encoding="utf-8"
        )
        logger.info(f"Wrote ledger to {target}")
        return target

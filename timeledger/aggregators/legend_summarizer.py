"""Per-project hour totals for the chart legend."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List

from timeledger.calculators.time_utils import (
    calculate_entry_minutes,
    minutes_to_decimal_hours,
)
from timeledger.models.project import Project
from timeledger.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)


@dataclass
class LegendItem:
    """Legend line for one project.

    Attributes:
        id: Project identity
        name: Project name
        color: Project display color
        total_hours: Hours over the whole filtered year
    """

    id: str
    name: str
    color: str
    total_hours: Decimal


class LegendSummarizer:
    """Summarizes filtered, year-scoped entries per project.

    Example:
        >>> legend = LegendSummarizer().summarize(entries, projects)
        >>> [item.name for item in legend]
        ['Website', 'Intranet']
    """

    def summarize(
        self, entries: Iterable[TimeEntry], projects: Iterable[Project]
    ) -> List[LegendItem]:
        """Build one legend item per distinct project.

        Entries whose project is missing from the catalog are skipped.

        Args:
            entries: Year and filter scoped entries
            projects: Project catalog

        Returns:
            LegendItems sorted by total hours descending; ties keep
            first-encounter order
        """
        catalog = {project.id: project for project in projects}
        minutes_by_project: Dict[str, int] = {}
        skipped = 0

        for entry in entries:
            if entry.project not in catalog:
                skipped += 1
                continue
            minutes_by_project[entry.project] = minutes_by_project.get(
                entry.project, 0
            ) + calculate_entry_minutes(entry)

        if skipped:
            logger.warning(f"Skipped {skipped} entries with unknown projects")

        legend = [
            LegendItem(
                id=project_id,
                name=catalog[project_id].name,
                color=catalog[project_id].color,
                total_hours=minutes_to_decimal_hours(minutes),
            )
            for project_id, minutes in minutes_by_project.items()
        ]
        legend.sort(key=lambda item: item.total_hours, reverse=True)
        return legend

"""Monthly financial aggregation for yearly reports.

This module produces one aggregate per calendar month of a target year:
worked hours, the billed amount of those hours, and the amounts of the
three cost-item categories, plus a per-project hour breakdown.

The project selection is always reconciled against the client filter
before any record is counted.
"""

import datetime as dt
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

import pandas as pd

from timeledger.calculators.billing_calculator import calculate_hours_amount
from timeledger.calculators.time_utils import (
    calculate_entry_minutes,
    minutes_to_decimal_hours,
)
from timeledger.filters.filter_resolver import FilterResolver, ResolvedFilter
from timeledger.filters.record_filters import filter_cost_items, filter_time_entries
from timeledger.models.cost_item import CostCategory, CostItem
from timeledger.models.filters import FilterCriteria, InvoiceStatus
from timeledger.models.project import Project
from timeledger.models.snapshot import WorkspaceSnapshot
from timeledger.models.time_entry import TimeEntry
from timeledger.utils.logging_utils import LogContext

logger = logging.getLogger(__name__)


@dataclass
class ProjectHours:
    """Hours of one project within a month.

    Attributes:
        project_id: Project identity
        name: Project name
        color: Project display color
        hours: Hours worked on the project in the month
    """

    project_id: str
    name: str
    color: str
    hours: Decimal


@dataclass
class MonthlyAggregate:
    """Aggregated figures for one calendar month.

    Attributes:
        month: Month number (1-12)
        month_start: First day of the month
        total_hours: Hours worked (time entries only)
        hours_amount: Billed amount of billable hours
        license_amount: Sum of license prices
        server_amount: Sum of server prices
        domain_amount: Sum of domain prices
        total_amount: Sum of the four amounts
        entry_count: Number of time entries counted
        project_breakdown: Hours per project, hours descending
    """

    month: int
    month_start: dt.date
    total_hours: Decimal
    hours_amount: Decimal
    license_amount: Decimal
    server_amount: Decimal
    domain_amount: Decimal
    total_amount: Decimal
    entry_count: int
    project_breakdown: List[ProjectHours] = field(default_factory=list)

    def category_amount(self, category: CostCategory) -> Decimal:
        """Get the amount of one cost category."""
        return {
            CostCategory.LICENSES: self.license_amount,
            CostCategory.SERVERS: self.server_amount,
            CostCategory.DOMAINS: self.domain_amount,
        }[category]


@dataclass
class YearlyReport:
    """Monthly aggregates of a year and their totals.

    Attributes:
        year: Target year
        monthly_data: Twelve MonthlyAggregates, January first
        active_project_ids: Project ids the report was scoped to
        available_projects: Projects available under the client filter
        invoice_status: Invoice status selector used
    """

    year: int
    monthly_data: List[MonthlyAggregate]
    active_project_ids: frozenset
    available_projects: List[Project]
    invoice_status: InvoiceStatus

    @property
    def grand_total_hours(self) -> Decimal:
        """Sum of the monthly hours."""
        return sum((m.total_hours for m in self.monthly_data), Decimal("0.00"))

    @property
    def grand_total_amount(self) -> Decimal:
        """Sum of the monthly total amounts."""
        return sum((m.total_amount for m in self.monthly_data), Decimal("0.00"))

    @property
    def hours_amount_total(self) -> Decimal:
        """Year total of billed hours."""
        return sum((m.hours_amount for m in self.monthly_data), Decimal("0.00"))

    def category_total(self, category: CostCategory) -> Decimal:
        """Year total of one cost category."""
        return sum(
            (m.category_amount(category) for m in self.monthly_data), Decimal("0.00")
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Build a month-by-month table of the report.

        Returns:
            DataFrame indexed by month name with hour, amount and entry
            count columns
        """
        rows = [
            {
                "Month": m.month_start.strftime("%B"),
                "Hours": m.total_hours,
                "Hours Amount": m.hours_amount,
                "Licenses": m.license_amount,
                "Servers": m.server_amount,
                "Domains": m.domain_amount,
                "Total": m.total_amount,
                "Entries": m.entry_count,
            }
            for m in self.monthly_data
        ]
        return pd.DataFrame(rows).set_index("Month")


def sum_cost_items(items: Sequence[CostItem]) -> Decimal:
    """Sum the prices of cost items."""
    return sum((item.price for item in items), Decimal("0.00"))


class MonthlyAggregator:
    """Builds the twelve monthly aggregates of a year.

    The aggregator:
    1. Reconciles the project selection with the client filter
    2. Filters time entries by year, project and invoice status
    3. Sums hours and billed amounts per month
    4. Sums each cost category per month through one generic function
    5. Breaks the month's hours down per project

    Example:
        >>> aggregator = MonthlyAggregator()
        >>> report = aggregator.aggregate(snapshot, FilterCriteria(year=2024))
        >>> len(report.monthly_data)
        12
    """

    def __init__(self, filter_resolver: Optional[FilterResolver] = None):
        """Initialize the aggregator.

        Args:
            filter_resolver: Resolver for the project selection
        """
        self.filter_resolver = filter_resolver or FilterResolver()

    def resolve_filter(
        self, snapshot: WorkspaceSnapshot, criteria: FilterCriteria
    ) -> ResolvedFilter:
        """Resolve the available projects and active project ids."""
        return self.filter_resolver.resolve(
            snapshot.projects,
            snapshot.clients,
            criteria.client,
            criteria.project_ids,
        )

    def filter_entries(
        self, snapshot: WorkspaceSnapshot, criteria: FilterCriteria
    ) -> List[TimeEntry]:
        """Get the year-scoped, filtered time entries of a snapshot.

        Args:
            snapshot: Workspace snapshot
            criteria: Filter criteria

        Returns:
            Matching entries in snapshot order
        """
        resolved = self.resolve_filter(snapshot, criteria)
        return filter_time_entries(
            snapshot.entries,
            criteria.year,
            resolved.active_project_ids,
            criteria.invoice_status,
        )

    def aggregate(
        self, snapshot: WorkspaceSnapshot, criteria: FilterCriteria
    ) -> YearlyReport:
        """Aggregate a snapshot into twelve monthly figures.

        Args:
            snapshot: Workspace snapshot
            criteria: Filter criteria (year, client, projects, invoice status)

        Returns:
            YearlyReport with one MonthlyAggregate per month
        """
        with LogContext(year=criteria.year, client_filter=criteria.client):
            resolved = self.resolve_filter(snapshot, criteria)
            active_ids = resolved.active_project_ids
            projects = snapshot.project_index()

            year_entries = filter_time_entries(
                snapshot.entries, criteria.year, active_ids, criteria.invoice_status
            )
            logger.info(
                f"Aggregating {len(year_entries)} entries for {criteria.year} "
                f"across {len(active_ids)} project(s)"
            )

            entries_by_month: Dict[int, List[TimeEntry]] = defaultdict(list)
            for entry in year_entries:
                entries_by_month[entry.date.month].append(entry)

            monthly_data = []
            for month in range(1, 13):
                month_entries = entries_by_month.get(month, [])
                category_amounts = {
                    category: self.aggregate_cost_category(
                        snapshot.cost_items(category), criteria, active_ids, month
                    )
                    for category in CostCategory
                }
                monthly_data.append(
                    self._aggregate_month(
                        criteria.year, month, month_entries, projects, category_amounts
                    )
                )

            report = YearlyReport(
                year=criteria.year,
                monthly_data=monthly_data,
                active_project_ids=active_ids,
                available_projects=resolved.available_projects,
                invoice_status=criteria.invoice_status,
            )
            logger.info(
                f"Year {criteria.year}: {report.grand_total_hours} hours, "
                f"amount {report.grand_total_amount}"
            )
            return report

    def aggregate_cost_category(
        self,
        items: Sequence[CostItem],
        criteria: FilterCriteria,
        active_project_ids: frozenset,
        month: int,
    ) -> Decimal:
        """Sum one cost category for a month.

        Args:
            items: Cost items of the category
            criteria: Filter criteria (year and invoice status)
            active_project_ids: Reconciled project ids
            month: Month number (1-12)

        Returns:
            Sum of matching prices
        """
        matching = filter_cost_items(
            items, criteria.year, active_project_ids, criteria.invoice_status, month
        )
        return sum_cost_items(matching)

    def _aggregate_month(
        self,
        year: int,
        month: int,
        entries: List[TimeEntry],
        projects: Mapping[str, Project],
        category_amounts: Mapping[CostCategory, Decimal],
    ) -> MonthlyAggregate:
        total_minutes = sum(calculate_entry_minutes(entry) for entry in entries)
        hours_amount = calculate_hours_amount(entries, projects)

        license_amount = category_amounts[CostCategory.LICENSES]
        server_amount = category_amounts[CostCategory.SERVERS]
        domain_amount = category_amounts[CostCategory.DOMAINS]

        return MonthlyAggregate(
            month=month,
            month_start=dt.date(year, month, 1),
            total_hours=minutes_to_decimal_hours(total_minutes),
            hours_amount=hours_amount,
            license_amount=license_amount,
            server_amount=server_amount,
            domain_amount=domain_amount,
            total_amount=hours_amount + license_amount + server_amount + domain_amount,
            entry_count=len(entries),
            project_breakdown=self.project_breakdown(entries, projects),
        )

    def project_breakdown(
        self, entries: Sequence[TimeEntry], projects: Mapping[str, Project]
    ) -> List[ProjectHours]:
        """Group entries by project and sum their hours.

        Entries whose project is missing from the catalog are left out
        of the breakdown. Ties keep first-encounter order.

        Args:
            entries: Entries of one month
            projects: Project catalog keyed by id

        Returns:
            ProjectHours sorted by hours descending
        """
        minutes_by_project: Dict[str, int] = {}
        for entry in entries:
            minutes_by_project[entry.project] = minutes_by_project.get(
                entry.project, 0
            ) + calculate_entry_minutes(entry)

        breakdown = []
        for project_id, minutes in minutes_by_project.items():
            project = projects.get(project_id)
            if project is None:
                logger.warning(f"Entries reference unknown project {project_id}")
                continue
            breakdown.append(
                ProjectHours(
                    project_id=project_id,
                    name=project.name,
                    color=project.color,
                    hours=minutes_to_decimal_hours(minutes),
                )
            )

        breakdown.sort(key=lambda item: item.hours, reverse=True)
        return breakdown

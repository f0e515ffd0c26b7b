"""Year, project and invoice-status filtering of entity records."""

from typing import AbstractSet, Iterable, List, Optional

from timeledger.models.cost_item import CostItem
from timeledger.models.filters import InvoiceStatus
from timeledger.models.time_entry import TimeEntry


def filter_time_entries(
    entries: Iterable[TimeEntry],
    year: int,
    active_project_ids: AbstractSet[str],
    invoice_status: InvoiceStatus = InvoiceStatus.ALL,
) -> List[TimeEntry]:
    """Keep entries of the given year, active projects and invoice status.

    Input order is preserved.
    """
    return [
        entry
        for entry in entries
        if entry.date.year == year
        and entry.project in active_project_ids
        and invoice_status.matches(entry.invoiced)
    ]


def filter_cost_items(
    items: Iterable[CostItem],
    year: int,
    active_project_ids: AbstractSet[str],
    invoice_status: InvoiceStatus = InvoiceStatus.ALL,
    month: Optional[int] = None,
) -> List[CostItem]:
    """Keep cost items of the given year (and month), projects and status."""
    return [
        item
        for item in items
        if item.date.year == year
        and (month is None or item.date.month == month)
        and item.project in active_project_ids
        and invoice_status.matches(item.invoiced)
    ]

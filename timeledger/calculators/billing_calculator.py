"""Billing calculator for time entries.

This module turns worked minutes into billed amounts. Amounts are
accumulated as exact minute-times-rate products and divided by 60 only
once, so rounding happens a single time per reported figure.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping, Optional

from timeledger.calculators.time_utils import calculate_entry_minutes
from timeledger.models.project import Project
from timeledger.models.time_entry import TimeEntry

AMOUNT_QUANTUM = Decimal("0.01")


def round_amount(amount: Decimal) -> Decimal:
    """Round a monetary amount to cents.

    Example:
        >>> round_amount(Decimal("10.005"))
        Decimal('10.01')
    """
    return amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


def calculate_rate_minutes(entry: TimeEntry, project: Optional[Project]) -> Decimal:
    """Calculate the billed value of an entry in rate-minutes.

    Non-billable entries and entries without a known project contribute
    nothing regardless of rate.

    Args:
        entry: Time entry
        project: The entry's project, if it exists in the catalog

    Returns:
        minutes x hourly rate (divide by 60 for the amount)
    """
    if not entry.billable or project is None:
        return Decimal("0")
    return Decimal(calculate_entry_minutes(entry)) * project.hourly_rate


def calculate_billable_amount(entry: TimeEntry, project: Optional[Project]) -> Decimal:
    """Calculate the billed amount of a single entry.

    Args:
        entry: Time entry
        project: The entry's project, if it exists in the catalog

    Returns:
        Amount in workspace currency (2 decimal precision)

    Example:
        >>> import datetime as dt
        >>> entry = TimeEntry(
        ...     id="e1", project="p1", date=dt.date(2024, 3, 10),
        ...     start_time="09:00", end_time="11:00",
        ... )
        >>> calculate_billable_amount(entry, Project(id="p1", name="Web", rate=50))
        Decimal('100.00')
    """
    return round_amount(calculate_rate_minutes(entry, project) / Decimal("60"))


def calculate_hours_amount(
    entries: Iterable[TimeEntry], projects: Mapping[str, Project]
) -> Decimal:
    """Calculate the billed amount of several entries.

    Args:
        entries: Time entries
        projects: Project catalog keyed by id

    Returns:
        Total amount in workspace currency (2 decimal precision)
    """
    rate_minutes = sum(
        (calculate_rate_minutes(entry, projects.get(entry.project)) for entry in entries),
        Decimal("0"),
    )
    return round_amount(rate_minutes / Decimal("60"))

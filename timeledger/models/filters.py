"""Filter criteria for reports and exports."""

from enum import Enum
from typing import FrozenSet, Optional

from pydantic import Field, field_validator

from timeledger.models.base import BaseDataModel

ALL_CLIENTS = "all"
NO_CLIENT = "no-client"


class InvoiceStatus(str, Enum):
    """Invoice status selector."""

    ALL = "all"
    INVOICED = "invoiced"
    NOT_INVOICED = "not-invoiced"

    @property
    def label(self) -> str:
        """Human-readable label used in export headers."""
        return {
            InvoiceStatus.ALL: "All Statuses",
            InvoiceStatus.INVOICED: "Invoiced Only",
            InvoiceStatus.NOT_INVOICED: "Not Invoiced Only",
        }[self]

    def matches(self, invoiced: bool) -> bool:
        """Check whether a record's invoiced flag passes this selector.

        Example:
            >>> InvoiceStatus.NOT_INVOICED.matches(True)
            False
            >>> InvoiceStatus.ALL.matches(True)
            True
        """
        if self is InvoiceStatus.INVOICED:
            return invoiced is True
        if self is InvoiceStatus.NOT_INVOICED:
            return invoiced is not True
        return True


class FilterCriteria(BaseDataModel):
    """Filter state supplied by the caller for one aggregation run.

    Attributes:
        year: Target calendar year
        client: "all", "no-client", or a client id
        project_ids: Chosen project ids; None selects every available project
        invoice_status: Invoice status selector

    Example:
        >>> criteria = FilterCriteria(year=2024)
        >>> criteria.client, criteria.invoice_status.value
        ('all', 'all')
    """

    year: int = Field(..., ge=1, le=9999, description="Target year")
    client: str = Field(ALL_CLIENTS, min_length=1, description="Client selector")
    project_ids: Optional[FrozenSet[str]] = Field(
        None, description="Selected project ids (None = all available)"
    )
    invoice_status: InvoiceStatus = Field(
        InvoiceStatus.ALL, description="Invoice status selector"
    )

    @field_validator("project_ids", mode="before")
    @classmethod
    def to_frozenset(cls, v):
        """Accept any iterable of ids."""
        if v is None:
            return None
        return frozenset(v)

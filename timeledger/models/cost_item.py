"""Cost item data model.

Licenses, servers and domains share one record shape; the category is a
tag used for aggregation, not a type distinction.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import Field, field_validator

from timeledger.models.base import BaseDataModel, coerce_calendar_date


class CostCategory(str, Enum):
    """Recurring cost categories tracked next to worked time."""

    LICENSES = "licenses"
    SERVERS = "servers"
    DOMAINS = "domains"


class CostItem(BaseDataModel):
    """Represents a recurring non-time expense attributed to a project.

    ``client`` duplicates the referenced project's client name. It must
    match the project's client at write time; keeping it in sync on
    renames is the store's job, not the aggregation engine's.

    Attributes:
        id: Record identity
        name: Item name (e.g. "JetBrains licence")
        price: Non-negative amount in the workspace currency
        project: Referenced project id
        client: Denormalized client name
        date: Calendar date the cost applies to
        invoiced: Whether the item has been invoiced
        notes: Optional free-text notes

    Example:
        >>> item = CostItem(
        ...     id="l1",
        ...     name="IDE licence",
        ...     price="120",
        ...     project="p1",
        ...     client="Acme",
        ...     date=dt.date(2024, 6, 5),
        ... )
        >>> item.price
        Decimal('120')
    """

    id: str = Field(..., min_length=1, description="Item identity")
    name: str = Field(..., description="Item name")
    price: Decimal = Field(..., ge=0, description="Price in workspace currency")
    project: str = Field(..., description="Project id")
    client: str = Field("", description="Client name (denormalized)")
    date: dt.date = Field(..., description="Date the cost applies to")
    invoiced: bool = Field(False, description="Already invoiced")
    notes: Optional[str] = Field(None, description="Optional notes")

    @field_validator("date", mode="before")
    @classmethod
    def reduce_to_date(cls, v):
        """Keep only the calendar day of stored timestamps."""
        return coerce_calendar_date(v)

    @field_validator("client", mode="before")
    @classmethod
    def default_client(cls, v):
        """Treat a missing client name as empty."""
        return "" if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Union[str, int, float, Decimal]) -> Decimal:
        """Convert numeric values to Decimal for precision.

        Args:
            v: The value to convert

        Returns:
            The value as a Decimal

        Raises:
            ValueError: If the value cannot be converted to Decimal
        """
        if isinstance(v, Decimal):
            return v
        try:
            return Decimal(str(v))
        except (ArithmeticError, ValueError, TypeError) as e:
            raise ValueError(f"Cannot convert {v} to Decimal: {e}")

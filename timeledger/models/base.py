"""Base model for all data models in the time ledger.

This module provides a base Pydantic model with common configuration
and helper validators shared by the entity records.
"""

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Tolerance of store-specific extra fields (owner ids, timestamps)
    - Arbitrary types support for dates and decimals

    Example:
        >>> class Tag(BaseDataModel):
        ...     name: str
        >>> tag = Tag(name="urgent")
        >>> tag.model_dump()
        {'name': 'urgent'}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal, date
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # Records come from an external store which adds its own bookkeeping
        extra="ignore",
        # Accept both field names and store aliases (e.g. startTime)
        populate_by_name=True,
        frozen=False,
    )


def coerce_calendar_date(value: Any) -> Any:
    """Reduce a stored timestamp to its calendar date.

    The store keeps dates as timestamps; only the calendar day is
    significant, so "2024-03-10T09:00:00Z" and datetime values are cut
    down to the date part before validation.

    Args:
        value: Raw value from the store

    Returns:
        A date, or the original value for pydantic to validate

    Example:
        >>> coerce_calendar_date("2024-03-10T09:00:00Z")
        '2024-03-10'
        >>> coerce_calendar_date(dt.datetime(2024, 3, 10, 9, 0))
        datetime.date(2024, 3, 10)
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value

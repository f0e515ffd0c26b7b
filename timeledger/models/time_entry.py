"""Time entry data model.

This module defines the TimeEntry model which represents a single worked
time slot recorded against a project.
"""

import datetime as dt

from pydantic import AliasChoices, Field, field_validator, model_validator

from timeledger.models.base import BaseDataModel, coerce_calendar_date


class TimeEntry(BaseDataModel):
    """Represents a single time-tracking record.

    Start and end are kept as the "HH:MM" wall-clock strings the store
    holds. They are deliberately not format-validated here; duration
    calculation fails closed on malformed values instead.

    Attributes:
        id: Record identity
        description: Free-text description (may be empty)
        project: Referenced project id
        date: Calendar date of the work
        start_time: Start as "HH:MM"
        end_time: End as "HH:MM" (earlier than start means next day)
        billable: Whether the time is billed at the project rate
        invoiced: Whether the time has been invoiced

    Example:
        >>> entry = TimeEntry(
        ...     id="e1",
        ...     project="p1",
        ...     date=dt.date(2024, 3, 10),
        ...     start_time="09:00",
        ...     end_time="11:00",
        ... )
        >>> entry.billable, entry.invoiced
        (True, False)
    """

    id: str = Field(..., min_length=1, description="Entry identity")
    description: str = Field("", description="Free-text description")
    project: str = Field(..., description="Project id")
    date: dt.date = Field(..., description="Calendar date of the work")
    start_time: str = Field(
        ...,
        validation_alias=AliasChoices("start_time", "startTime"),
        description="Start time (HH:MM)",
    )
    end_time: str = Field(
        ...,
        validation_alias=AliasChoices("end_time", "endTime"),
        description="End time (HH:MM)",
    )
    billable: bool = Field(True, description="Billed at the project rate")
    invoiced: bool = Field(False, description="Already invoiced")

    @field_validator("date", mode="before")
    @classmethod
    def reduce_to_date(cls, v):
        """Keep only the calendar day of stored timestamps."""
        return coerce_calendar_date(v)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v):
        """Treat a missing description as empty."""
        return "" if v is None else v

    @model_validator(mode="after")
    def validate_invoice_state(self) -> "TimeEntry":
        """Validate that only billable time can be invoiced.

        Returns:
            The validated model instance

        Raises:
            ValueError: If the entry is invoiced but not billable
        """
        if self.invoiced and not self.billable:
            raise ValueError(
                f"Time entry {self.id} is marked invoiced but not billable"
            )
        return self

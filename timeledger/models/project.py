"""Project and client data models.

This module defines the Project and Client catalog records. A project's
``client`` holds the client's name, which is the join key used by
projects and cost items alike.
"""
from decimal import Decimal
from typing import Optional, Union

from pydantic import Field, field_validator

from timeledger.models.base import BaseDataModel


class Project(BaseDataModel):
    """Represents a project.

    Attributes:
        id: Project identity
        name: Project name
        client: Client name, or None for internal/unassigned projects
        color: Display color (CSS color string)
        active: Whether the project is offered in selection lists; reports
            include inactive projects too
        rate: Hourly rate in workspace currency, None counts as zero

    Example:
        >>> project = Project(id="p1", name="Website", client="Acme", rate=50)
        >>> project.hourly_rate
        Decimal('50')
        >>> Project(id="p2", name="Internal tooling").hourly_rate
        Decimal('0')
    """

    id: str = Field(..., min_length=1, description="Project identity")
    name: str = Field(..., min_length=1, description="Project name")
    client: Optional[str] = Field(None, description="Client name")
    color: str = Field("#9ca3af", description="Display color")
    active: bool = Field(True, description="Offered in selection lists")
    rate: Optional[Decimal] = Field(None, ge=0, description="Hourly rate")

    @field_validator("name")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Validate that string fields are not empty or whitespace only.

        Args:
            v: The value to validate
            info: Field validation info

        Returns:
            The validated value

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()

    @field_validator("client", mode="before")
    @classmethod
    def blank_client_is_unassigned(cls, v):
        """Treat an empty client name as no client."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v.strip() if isinstance(v, str) else v

    @field_validator("rate", mode="before")
    @classmethod
    def convert_to_decimal(
        cls, v: Union[str, int, float, Decimal, None]
    ) -> Optional[Decimal]:
        """Convert numeric rates to Decimal for precision."""
        if v is None or isinstance(v, Decimal):
            return v
        try:
            return Decimal(str(v))
        except (ArithmeticError, ValueError, TypeError) as e:
            raise ValueError(f"Cannot convert {v} to Decimal: {e}")

    @property
    def hourly_rate(self) -> Decimal:
        """Hourly rate with an absent rate counted as zero."""
        return self.rate if self.rate is not None else Decimal("0")


class Client(BaseDataModel):
    """Represents a client.

    Attributes:
        id: Client identity
        name: Normalized, unique client name (join key)
        color: Optional display color

    Example:
        >>> Client(id="c1", name=" Acme ").name
        'Acme'
    """

    id: str = Field(..., min_length=1, description="Client identity")
    name: str = Field(..., min_length=1, description="Client name")
    color: Optional[str] = Field(None, description="Display color")

    @field_validator("name")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Validate that the client name is not empty or whitespace only."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()

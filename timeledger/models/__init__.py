"""Data models for the time ledger.

This package contains Pydantic models for all entity records:
- BaseDataModel: Base class with common configuration
- TimeEntry: A worked time slot
- CostItem / CostCategory: License, server and domain costs
- Project / Client: Catalog records
- FilterCriteria / InvoiceStatus: Report filter state
- WorkspaceSettings: Currency display settings
- WorkspaceSnapshot: All collections of a workspace
"""

from timeledger.models.base import BaseDataModel
from timeledger.models.cost_item import CostCategory, CostItem
from timeledger.models.filters import (
    ALL_CLIENTS,
    NO_CLIENT,
    FilterCriteria,
    InvoiceStatus,
)
from timeledger.models.project import Client, Project
from timeledger.models.settings import WorkspaceSettings
from timeledger.models.snapshot import WorkspaceSnapshot
from timeledger.models.time_entry import TimeEntry

__all__ = [
    "ALL_CLIENTS",
    "NO_CLIENT",
    "BaseDataModel",
    "Client",
    "CostCategory",
    "CostItem",
    "FilterCriteria",
    "InvoiceStatus",
    "Project",
    "TimeEntry",
    "WorkspaceSettings",
    "WorkspaceSnapshot",
]

"""Filter resolution and record filtering."""

from timeledger.filters.filter_resolver import (
    FilterResolver,
    ResolvedFilter,
    selectable_projects,
    toggle_all_projects,
    toggle_project,
)
from timeledger.filters.record_filters import filter_cost_items, filter_time_entries

__all__ = [
    "FilterResolver",
    "ResolvedFilter",
    "filter_cost_items",
    "filter_time_entries",
    "selectable_projects",
    "toggle_all_projects",
    "toggle_project",
]

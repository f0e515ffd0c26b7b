"""Unit tests for record filtering."""

import datetime as dt

from timeledger.filters.record_filters import filter_cost_items, filter_time_entries
from timeledger.models.cost_item import CostItem
from timeledger.models.filters import InvoiceStatus
from timeledger.models.time_entry import TimeEntry


def make_entry(entry_id, project, date, invoiced=False):
    """Build a one hour entry."""
    return TimeEntry(
        id=entry_id,
        project=project,
        date=date,
        start_time="09:00",
        end_time="10:00",
        invoiced=invoiced,
    )


def make_item(item_id, project, date, invoiced=False):
    """Build a cost item priced 10."""
    return CostItem(
        id=item_id, name=item_id, price=10, project=project, date=date, invoiced=invoiced
    )


class TestFilterTimeEntries:
    """Test cases for filter_time_entries."""

    def test_year_project_and_status(self):
        """Test that all three conditions are applied."""
        entries = [
            make_entry("a", "p1", dt.date(2024, 1, 5)),
            make_entry("b", "p1", dt.date(2023, 12, 31)),
            make_entry("c", "p2", dt.date(2024, 2, 1)),
            make_entry("d", "p1", dt.date(2024, 3, 1), invoiced=True),
        ]
        result = filter_time_entries(entries, 2024, {"p1"}, InvoiceStatus.NOT_INVOICED)
        assert [e.id for e in result] == ["a"]

    def test_preserves_order(self):
        """Test that input order is kept."""
        entries = [
            make_entry("b", "p1", dt.date(2024, 5, 1)),
            make_entry("a", "p1", dt.date(2024, 1, 1)),
        ]
        assert [e.id for e in filter_time_entries(entries, 2024, {"p1"})] == ["b", "a"]

    def test_empty_active_set(self):
        """Test that no active projects yields nothing."""
        entries = [make_entry("a", "p1", dt.date(2024, 1, 5))]
        assert filter_time_entries(entries, 2024, frozenset()) == []


class TestFilterCostItems:
    """Test cases for filter_cost_items."""

    def test_month_filter(self):
        """Test that the optional month narrows the result."""
        items = [
            make_item("a", "p1", dt.date(2024, 6, 5)),
            make_item("b", "p1", dt.date(2024, 7, 5)),
        ]
        assert [i.id for i in filter_cost_items(items, 2024, {"p1"}, month=6)] == ["a"]
        assert len(filter_cost_items(items, 2024, {"p1"})) == 2

    def test_invoiced_item_excluded_under_not_invoiced(self):
        """Test that invoiced items drop out of a not-invoiced filter."""
        items = [make_item("l1", "p1", dt.date(2024, 6, 5), invoiced=True)]
        assert (
            filter_cost_items(items, 2024, {"p1"}, InvoiceStatus.NOT_INVOICED, 6) == []
        )
        assert len(filter_cost_items(items, 2024, {"p1"}, InvoiceStatus.INVOICED, 6)) == 1

"""Unit tests for filter criteria and the invoice status selector."""

import pytest
from pydantic import ValidationError

from timeledger.models.filters import ALL_CLIENTS, FilterCriteria, InvoiceStatus


class TestInvoiceStatus:
    """Test cases for InvoiceStatus."""

    @pytest.mark.parametrize(
        "status,invoiced,expected",
        [
            (InvoiceStatus.ALL, True, True),
            (InvoiceStatus.ALL, False, True),
            (InvoiceStatus.INVOICED, True, True),
            (InvoiceStatus.INVOICED, False, False),
            (InvoiceStatus.NOT_INVOICED, True, False),
            (InvoiceStatus.NOT_INVOICED, False, True),
        ],
    )
    def test_matches(self, status, invoiced, expected):
        """Test the invoiced flag predicate of each selector."""
        assert status.matches(invoiced) is expected

    def test_labels(self):
        """Test the export header labels."""
        assert InvoiceStatus.ALL.label == "All Statuses"
        assert InvoiceStatus.INVOICED.label == "Invoiced Only"
        assert InvoiceStatus.NOT_INVOICED.label == "Not Invoiced Only"

    def test_from_value(self):
        """Test lookup by the CLI value."""
        assert InvoiceStatus("not-invoiced") is InvoiceStatus.NOT_INVOICED


class TestFilterCriteria:
    """Test cases for FilterCriteria."""

    def test_defaults(self):
        """Test that defaults select everything."""
        criteria = FilterCriteria(year=2024)
        assert criteria.client == ALL_CLIENTS
        assert criteria.project_ids is None
        assert criteria.invoice_status is InvoiceStatus.ALL

    def test_project_ids_become_frozenset(self):
        """Test that any iterable of ids is accepted."""
        criteria = FilterCriteria(year=2024, project_ids=["p1", "p2", "p1"])
        assert criteria.project_ids == frozenset({"p1", "p2"})

    def test_invalid_year_rejected(self):
        """Test that the year must be a calendar year."""
        with pytest.raises(ValidationError):
            FilterCriteria(year=0)

    def test_status_from_string(self):
        """Test that invoice status values are coerced."""
        criteria = FilterCriteria(year=2024, invoice_status="invoiced")
        assert criteria.invoice_status is InvoiceStatus.INVOICED

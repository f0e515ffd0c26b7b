"""Unit tests for the ledger exporter."""

import datetime as dt

import pytest

from timeledger.models.filters import FilterCriteria, InvoiceStatus
from timeledger.models.project import Client, Project
from timeledger.models.snapshot import WorkspaceSnapshot
from timeledger.models.time_entry import TimeEntry
from timeledger.writers.ledger_exporter import (
    CLIENT_RULE,
    SECTION_RULE,
    LedgerExporter,
)

GENERATED_AT = dt.datetime(2024, 4, 15, 10, 30)


def make_entry(entry_id, project, date, start, end, description="", invoiced=False):
    """Build a billable entry."""
    return TimeEntry(
        id=entry_id,
        project=project,
        date=date,
        start_time=start,
        end_time=end,
        description=description,
        invoiced=invoiced,
    )


@pytest.fixture
def acme_snapshot():
    """Two Acme projects and one internal project."""
    return WorkspaceSnapshot(
        clients=[Client(id="c1", name="Acme")],
        projects=[
            Project(id="p1", name="Website", client="Acme", rate=50),
            Project(id="p2", name="App", client="Acme", rate=80),
            Project(id="p3", name="Tools"),
        ],
        entries=[
            make_entry("e1", "p2", dt.date(2024, 3, 12), "10:00", "10:45"),
            make_entry("e2", "p1", dt.date(2024, 3, 4), "09:00", "11:00", "Landing page"),
            make_entry(
                "e3", "p2", dt.date(2024, 3, 2), "13:00", "14:30", "Login flow", True
            ),
            make_entry("e4", "p3", dt.date(2023, 3, 2), "13:00", "14:00"),
        ],
    )


@pytest.fixture
def exporter():
    """Exporter instance."""
    return LedgerExporter()


class TestLedgerExporter:
    """Test cases for LedgerExporter.export."""

    def test_acme_two_projects(self, exporter, acme_snapshot):
        """Test the complete document for one client with two projects."""
        text = exporter.export(
            acme_snapshot, FilterCriteria(year=2024), generated_at=GENERATED_AT
        )

        assert text == "\n".join(
            [
                "REPORT EXPORT - 2024",
                "Client Filter: All Clients",
                "Billing Status: All Statuses",
                "Generated: 15/04/2024 10:30",
                SECTION_RULE,
                "",
                "CLIENT: Acme",
                CLIENT_RULE,
                "  PROJECT: App",
                "    02/03/2024 | 13:00 - 14:30 | 1.50h - Login flow [INVOICED]",
                "    12/03/2024 | 10:00 - 10:45 | 0.75h ",
                "    >>> TOTAL PROJECT: 2.25 hours",
                "",
                "  PROJECT: Website",
                "    04/03/2024 | 09:00 - 11:00 | 2.00h - Landing page ",
                "    >>> TOTAL PROJECT: 2.00 hours",
                "",
                "",
                SECTION_RULE,
                "GRAND TOTAL: 4.25 hours",
                "",
            ]
        )

    def test_rule_widths(self):
        """Test that both separators are 65 characters."""
        assert SECTION_RULE == "=" * 65
        assert CLIENT_RULE == "-" * 65

    def test_no_client_section_and_filter_header(self, exporter, acme_snapshot):
        """Test the internal project block and its header label."""
        acme_snapshot.entries.append(
            make_entry("e5", "p3", dt.date(2024, 5, 1), "08:00", "09:00")
        )
        text = exporter.export(
            acme_snapshot,
            FilterCriteria(year=2024, client="no-client"),
            generated_at=GENERATED_AT,
        )
        lines = text.splitlines()

        assert lines[1] == "Client Filter: Internal / No Client"
        assert "CLIENT: No Client / Internal" in lines
        assert "CLIENT: Acme" not in lines
        assert lines[-1] == "GRAND TOTAL: 1.00 hours"

    def test_invoice_status_header_and_filter(self, exporter, acme_snapshot):
        """Test that the invoice status selects entries and labels the header."""
        text = exporter.export(
            acme_snapshot,
            FilterCriteria(year=2024, client="c1", invoice_status=InvoiceStatus.INVOICED),
            generated_at=GENERATED_AT,
        )
        lines = text.splitlines()

        assert lines[1] == "Client Filter: Acme"
        assert lines[2] == "Billing Status: Invoiced Only"
        assert "  PROJECT: Website" not in lines
        assert lines[-1] == "GRAND TOTAL: 1.50 hours"

    def test_empty_export(self, exporter):
        """Test that an empty selection still has header and grand total."""
        text = exporter.export(
            WorkspaceSnapshot(), FilterCriteria(year=2024), generated_at=GENERATED_AT
        )
        assert text.splitlines()[-2:] == [SECTION_RULE, "GRAND TOTAL: 0.00 hours"]
        assert "CLIENT:" not in text

    def test_unknown_project_excluded(self, exporter, acme_snapshot):
        """Test that entries of deleted projects are left out."""
        acme_snapshot.entries.append(
            make_entry("e9", "deleted", dt.date(2024, 3, 1), "08:00", "18:00")
        )
        text = exporter.export(
            acme_snapshot, FilterCriteria(year=2024), generated_at=GENERATED_AT
        )
        assert text.splitlines()[-1] == "GRAND TOTAL: 4.25 hours"

    def test_grand_total_is_sum_of_project_totals(self, exporter, acme_snapshot):
        """Test that the grand total matches the project subtotals."""
        text = exporter.export(
            acme_snapshot, FilterCriteria(year=2024), generated_at=GENERATED_AT
        )
        subtotals = [
            float(line.split(":")[1].split()[0])
            for line in text.splitlines()
            if ">>> TOTAL PROJECT:" in line
        ]
        grand = float(text.splitlines()[-1].split(":")[1].split()[0])
        assert grand == pytest.approx(sum(subtotals))


class TestFormatEntryLine:
    """Test cases for LedgerExporter.format_entry_line."""

    def test_without_description(self):
        """Test that no description keeps only the marker separator."""
        entry = make_entry("e1", "p1", dt.date(2024, 3, 10), "23:30", "00:15")
        assert (
            LedgerExporter.format_entry_line(entry, 45)
            == "    10/03/2024 | 23:30 - 00:15 | 0.75h "
        )

    def test_invoiced_marker(self):
        """Test that invoiced entries carry the marker."""
        entry = make_entry(
            "e1", "p1", dt.date(2024, 3, 10), "09:00", "11:00", "Homepage", True
        )
        assert LedgerExporter.format_entry_line(entry, 120).endswith(
            "2.00h - Homepage [INVOICED]"
        )

    def test_not_invoiced_keeps_separator(self):
        """Test that a line without the marker still ends with its separator."""
        entry = make_entry("e1", "p1", dt.date(2024, 3, 10), "09:00", "11:00", "Homepage")
        assert (
            LedgerExporter.format_entry_line(entry, 120)
            == "    10/03/2024 | 09:00 - 11:00 | 2.00h - Homepage "
        )


class TestExportFile:
    """Test cases for export file naming and writing."""

    @pytest.mark.parametrize(
        "criteria,expected",
        [
            (FilterCriteria(year=2024), "Report_2024_All_all.txt"),
            (
                FilterCriteria(
                    year=2023, client="c1", invoice_status=InvoiceStatus.NOT_INVOICED
                ),
                "Report_2023_c1_not-invoiced.txt",
            ),
        ],
    )
    def test_export_filename(self, criteria, expected):
        """Test the default file name."""
        assert LedgerExporter.export_filename(criteria) == expected

    def test_write_creates_directories(self, exporter, acme_snapshot, tmp_path):
        """Test that the ledger is written as UTF-8 text."""
        target = tmp_path / "nested" / "ledger.txt"
        written = exporter.write(
            target, acme_snapshot, FilterCriteria(year=2024), generated_at=GENERATED_AT
        )

        assert written == target
        content = target.read_text(encoding="utf-8")
        assert content.startswith("REPORT EXPORT - 2024\n")
        assert content.endswith("GRAND TOTAL: 4.25 hours\n")

"""Writers module for export documents and display formatting."""

from timeledger.writers.display import (
    day_label,
    format_clock_duration,
    format_currency,
    format_hours_clock,
    week_label,
)
from timeledger.writers.ledger_exporter import LedgerExporter

__all__ = [
    "LedgerExporter",
    "day_label",
    "format_clock_duration",
    "format_currency",
    "format_hours_clock",
    "week_label",
]

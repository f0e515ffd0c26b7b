"""CLI utility functions."""

from timeledger.cli.utils.formatters import (
    format_dataframe,
    format_error,
    format_info,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_dataframe",
    "format_error",
    "format_info",
    "format_success",
    "format_table",
    "format_warning",
]

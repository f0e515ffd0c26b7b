"""Output formatting utilities for CLI."""

from decimal import Decimal
from numbers import Number
from typing import Callable, Dict, List, Optional

import click
import pandas as pd


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def _is_numeric(value) -> bool:
    return isinstance(value, (Number, Decimal)) and not isinstance(value, bool)


def format_table(
    headers: List[str],
    rows: List[List],
    max_width: int = 40,
    align_numbers: bool = True,
) -> str:
    """Format data as a table.

    Numeric cells are right-aligned, everything else left-aligned.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column (default: 40)
        align_numbers: Right-align numeric cells (default: True)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(headers)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))
    col_widths = [min(w, max_width) for w in col_widths]

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    def render(cells: List, is_header: bool = False) -> str:
        rendered = []
        for i, cell in enumerate(cells[: len(headers)]):
            text = str(cell)[: col_widths[i]]
            if align_numbers and not is_header and _is_numeric(cell):
                rendered.append(f" {text:>{col_widths[i]}} ")
            else:
                rendered.append(f" {text:<{col_widths[i]}} ")
        return "|" + "|".join(rendered) + "|"

    table_lines = [separator, render(headers, is_header=True), separator]
    if rows:
        table_lines.extend(render(row) for row in rows)
        table_lines.append(separator)

    return "\n".join(table_lines)


def format_dataframe(
    df: pd.DataFrame,
    formatters: Optional[Dict[str, Callable[[object], str]]] = None,
) -> str:
    """Format a DataFrame (index included) as a table.

    Args:
        df: DataFrame to render
        formatters: Optional per-column cell formatters

    Returns:
        Formatted table as a string
    """
    formatters = formatters or {}
    index_name = df.index.name or ""
    headers = [index_name] + [str(column) for column in df.columns]

    rows = []
    for index, record in df.iterrows():
        row = [str(index)]
        for column in df.columns:
            value = record[column]
            formatter = formatters.get(column)
            row.append(formatter(value) if formatter else value)
        rows.append(row)

    return format_table(headers, rows)

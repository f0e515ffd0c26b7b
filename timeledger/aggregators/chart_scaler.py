"""Proportional bar heights for the monthly hours chart.

All segments are scaled against one year-wide maximum, not each month's
own total.
"""

import datetime as dt
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Sequence

from timeledger.aggregators.monthly_aggregator import MonthlyAggregate

logger = logging.getLogger(__name__)

# Floor for the shared maximum
MIN_SCALE_HOURS = Decimal("1")


@dataclass
class ChartSegment:
    """One project's share of a month's bar.

    Attributes:
        project_id: Project identity
        name: Project name
        color: Project display color
        hours: Hours of the project in the month
        fraction: Height as a fraction of the shared maximum (0-1)
    """

    project_id: str
    name: str
    color: str
    hours: Decimal
    fraction: float

    @property
    def percentage(self) -> float:
        """Height as a percentage of the chart."""
        return self.fraction * 100


@dataclass
class ChartColumn:
    """A month's stacked bar.

    Attributes:
        month_start: First day of the month
        total_hours: Hours of the month
        fraction: Total bar height as a fraction of the shared maximum
        segments: Per-project segments, hours descending
    """

    month_start: dt.date
    total_hours: Decimal
    fraction: float
    segments: List[ChartSegment] = field(default_factory=list)


class ChartScaler:
    """Derives bar segment heights across a twelve-month series.

    Example:
        >>> columns = ChartScaler().scale(report.monthly_data)
        >>> all(0 <= s.fraction <= 1 for c in columns for s in c.segments)
        True
    """

    def max_hours(self, monthly_data: Sequence[MonthlyAggregate]) -> Decimal:
        """Get the shared maximum: the largest monthly total, at least 1."""
        return max([m.total_hours for m in monthly_data] + [MIN_SCALE_HOURS])

    def scale(self, monthly_data: Sequence[MonthlyAggregate]) -> List[ChartColumn]:
        """Scale every month's segments against the shared maximum.

        Args:
            monthly_data: Monthly aggregates with project breakdowns

        Returns:
            One ChartColumn per month, in input order
        """
        max_hours = self.max_hours(monthly_data)
        logger.debug(f"Scaling chart to {max_hours} hours")

        return [
            ChartColumn(
                month_start=month.month_start,
                total_hours=month.total_hours,
                fraction=self._fraction(month.total_hours, max_hours),
                segments=[
                    ChartSegment(
                        project_id=item.project_id,
                        name=item.name,
                        color=item.color,
                        hours=item.hours,
                        fraction=self._fraction(item.hours, max_hours),
                    )
                    for item in month.project_breakdown
                ],
            )
            for month in monthly_data
        ]

    @staticmethod
    def _fraction(hours: Decimal, max_hours: Decimal) -> float:
        return min(max(float(hours / max_hours), 0.0), 1.0)

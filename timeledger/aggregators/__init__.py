"""Aggregators module for grouping and summarizing time and cost records.

This module provides the week/day grouping of the activity feed and the
monthly rollups, chart scaling and legend of yearly reports.
"""

from timeledger.aggregators.chart_scaler import ChartColumn, ChartScaler, ChartSegment
from timeledger.aggregators.legend_summarizer import LegendItem, LegendSummarizer
from timeledger.aggregators.monthly_aggregator import (
    MonthlyAggregate,
    MonthlyAggregator,
    ProjectHours,
    YearlyReport,
)
from timeledger.aggregators.week_grouper import (
    DayGroup,
    WeekDayGrouper,
    WeekGroup,
    get_week_start,
)

__all__ = [
    "ChartColumn",
    "ChartScaler",
    "ChartSegment",
    "DayGroup",
    "LegendItem",
    "LegendSummarizer",
    "MonthlyAggregate",
    "MonthlyAggregator",
    "ProjectHours",
    "WeekDayGrouper",
    "WeekGroup",
    "YearlyReport",
    "get_week_start",
]

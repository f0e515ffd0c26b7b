"""Week and day grouping of time entries for the activity feed.

This module buckets time entries into Monday-aligned weeks and, within
each week, calendar days, keeping per-day and per-week duration totals.
"""

import datetime as dt
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List

from timeledger.calculators.time_utils import (
    calculate_entry_minutes,
    minutes_to_decimal_hours,
    parse_clock_minutes,
)
from timeledger.models.time_entry import TimeEntry

logger = logging.getLogger(__name__)


@dataclass
class DayGroup:
    """Entries of one calendar day.

    Attributes:
        date: The calendar day
        entries: Entries dated that day, latest start first
        total_minutes: Sum of the entries' durations
    """

    date: dt.date
    entries: List[TimeEntry] = field(default_factory=list)
    total_minutes: int = 0

    @property
    def total_hours(self) -> Decimal:
        """Total duration in decimal hours."""
        return minutes_to_decimal_hours(self.total_minutes)


@dataclass
class WeekGroup:
    """Entries of one Monday-to-Sunday week.

    Attributes:
        start: Monday of the week
        end: Sunday of the week
        days: Days with entries, most recent first
        total_minutes: Sum of the days' totals
    """

    start: dt.date
    end: dt.date
    days: List[DayGroup] = field(default_factory=list)
    total_minutes: int = 0

    @property
    def total_hours(self) -> Decimal:
        """Total duration in decimal hours."""
        return minutes_to_decimal_hours(self.total_minutes)

    def contains(self, day: dt.date) -> bool:
        """Check whether a date falls within this week."""
        return self.start <= day <= self.end


def get_week_start(day: dt.date) -> dt.date:
    """Get the Monday on or before a date.

    Example:
        >>> get_week_start(dt.date(2024, 5, 3))
        datetime.date(2024, 4, 29)
        >>> get_week_start(dt.date(2024, 4, 29))
        datetime.date(2024, 4, 29)
    """
    if isinstance(day, dt.datetime):
        day = day.date()
    return day - dt.timedelta(days=day.weekday())


class WeekDayGrouper:
    """Groups time entries into weeks and days for the activity feed.

    The grouping is sparse: only weeks and days that have entries appear.
    Weeks come most recent first, days within a week most recent first,
    and entries within a day by start time descending.

    Example:
        >>> grouper = WeekDayGrouper()
        >>> entries = [
        ...     TimeEntry(id="a", project="p", date=dt.date(2024, 5, 1),
        ...               start_time="09:00", end_time="10:00"),
        ...     TimeEntry(id="b", project="p", date=dt.date(2024, 5, 3),
        ...               start_time="09:00", end_time="09:30"),
        ... ]
        >>> weeks = grouper.group(entries)
        >>> [day.date.day for day in weeks[0].days]
        [3, 1]
        >>> weeks[0].total_minutes
        90
    """

    def sort_entries(self, entries: Iterable[TimeEntry]) -> List[TimeEntry]:
        """Sort entries by date descending, then start time descending.

        Start times compare as clock values, so "9:00" is earlier than
        "10:00". Entries with equal date and start time keep their input order.
        """
        return sorted(
            entries,
            key=lambda entry: (entry.date, parse_clock_minutes(entry.start_time)),
            reverse=True,
        )

    def group(self, entries: Iterable[TimeEntry]) -> List[WeekGroup]:
        """Group entries into weeks and days.

        Args:
            entries: Time entries in any order

        Returns:
            WeekGroups, most recent week first
        """
        sorted_entries = self.sort_entries(entries)
        logger.debug(f"Grouping {len(sorted_entries)} entries by week")

        weeks: List[WeekGroup] = []
        weeks_by_start: Dict[dt.date, WeekGroup] = {}
        days_by_date: Dict[dt.date, DayGroup] = {}

        # Descending input creates weeks and days in descending order
        for entry in sorted_entries:
            week_start = get_week_start(entry.date)

            week = weeks_by_start.get(week_start)
            if week is None:
                week = WeekGroup(start=week_start, end=week_start + dt.timedelta(days=6))
                weeks_by_start[week_start] = week
                weeks.append(week)

            day = days_by_date.get(entry.date)
            if day is None:
                day = DayGroup(date=entry.date)
                days_by_date[entry.date] = day
                week.days.append(day)

            minutes = calculate_entry_minutes(entry)
            day.entries.append(entry)
            day.total_minutes += minutes
            week.total_minutes += minutes

        logger.debug(f"Grouped entries into {len(weeks)} week(s)")
        return weeks

"""Display formatting for durations, feed headings and amounts.

Currency amounts are formatted with Babel using the workspace's currency
code and locale tag; the engine itself only ever adds amounts.
"""

import datetime as dt
from decimal import Decimal
from typing import Union

from babel.numbers import format_currency as babel_format_currency

from timeledger.aggregators.week_grouper import WeekGroup
from timeledger.models.settings import WorkspaceSettings, parse_locale


def format_clock_duration(minutes: int) -> str:
    """Format minutes as "HH:MM:00".

    Example:
        >>> format_clock_duration(90)
        '01:30:00'
        >>> format_clock_duration(1500)
        '25:00:00'
    """
    hours, mins = divmod(max(int(minutes), 0), 60)
    return f"{hours:02d}:{mins:02d}:00"


def format_hours_clock(hours: Union[Decimal, float]) -> str:
    """Format decimal hours as "HH:MM:00".

    Example:
        >>> format_hours_clock(Decimal("2.75"))
        '02:45:00'
    """
    return format_clock_duration(int((Decimal(str(hours)) * 60).to_integral_value()))


def _month_day(day: dt.date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def week_label(week: WeekGroup, today: dt.date) -> str:
    """Heading of a week in the activity feed.

    Example:
        >>> week_label(week_of_apr_29, today=dt.date(2024, 6, 1))
        'Apr 29 - May 5'
    """
    if week.contains(today):
        return "This week"
    return f"{_month_day(week.start)} - {_month_day(week.end)}"


def day_label(day: dt.date, today: dt.date) -> str:
    """Heading of a day in the activity feed.

    Example:
        >>> day_label(dt.date(2024, 5, 2), today=dt.date(2024, 5, 3))
        'Yesterday'
        >>> day_label(dt.date(2024, 5, 1), today=dt.date(2024, 5, 3))
        'Wed, May 1'
    """
    if day == today:
        return "Today"
    if day == today - dt.timedelta(days=1):
        return "Yesterday"
    return f"{day.strftime('%a')}, {_month_day(day)}"


def format_currency(amount: Union[Decimal, float, int], settings: WorkspaceSettings) -> str:
    """Format an amount in the workspace currency and locale.

    Example:
        >>> format_currency(Decimal("1234.5"), WorkspaceSettings())
        '$1,234.50'
    """
    return babel_format_currency(
        amount, settings.currency, locale=parse_locale(settings.currency_locale)
    )

"""Time calculation utilities for the time ledger.

This module provides low-level utilities for time calculations including:
- Parsing "HH:MM" wall-clock strings into minutes since midnight
- Calculating durations between two wall-clock times (with overnight wrap)
- Converting minutes to decimal hours

These utilities are timezone-agnostic. An entry whose end is earlier than
its start is read as an overnight shift ending the next day, but stays
attributed to its stored date.
"""

from decimal import ROUND_HALF_UP, Decimal

MINUTES_PER_DAY = 24 * 60

HOURS_QUANTUM = Decimal("0.01")


def _parse_component(value: str, limit: int) -> int:
    """Parse one clock component, counting anything outside [0, limit) as zero."""
    try:
        number = int(value.strip())
    except (ValueError, AttributeError):
        return 0
    return number if 0 <= number < limit else 0


def parse_clock_minutes(clock: str) -> int:
    """Convert an "HH:MM" string to minutes since midnight.

    Malformed input fails closed: a missing, non-numeric or out-of-range
    hour or minute component counts as zero, so a bad record can never
    poison a sum.

    Args:
        clock: Wall-clock time as "HH:MM"

    Returns:
        Minutes since midnight

    Example:
        >>> parse_clock_minutes("09:30")
        570
        >>> parse_clock_minutes("23:59")
        1439
        >>> parse_clock_minutes("xx:15")
        15
        >>> parse_clock_minutes("9:75")
        540
        >>> parse_clock_minutes("")
        0
    """
    if not isinstance(clock, str):
        return 0
    hours, _, minutes = clock.partition(":")
    return _parse_component(hours, 24) * 60 + _parse_component(minutes, 60)


def calculate_duration_minutes(start_time: str, end_time: str) -> int:
    """Calculate elapsed minutes between two "HH:MM" times.

    Args:
        start_time: Start as "HH:MM"
        end_time: End as "HH:MM"

    Returns:
        Non-negative duration in minutes

    Example:
        >>> calculate_duration_minutes("09:00", "17:00")
        480
        >>> calculate_duration_minutes("23:30", "00:15")
        45
        >>> calculate_duration_minutes("10:00", "10:00")
        0

    Note:
        When end is earlier than start, one day (1440 minutes) is added.
        Equal times are a zero-length entry, not a 24-hour shift.
    """
    minutes = parse_clock_minutes(end_time) - parse_clock_minutes(start_time)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def calculate_entry_minutes(entry) -> int:
    """Calculate the duration of a time entry in minutes.

    Args:
        entry: Any record with ``start_time`` and ``end_time`` strings

    Returns:
        Duration in minutes
    """
    return calculate_duration_minutes(entry.start_time, entry.end_time)


def minutes_to_decimal_hours(minutes: int) -> Decimal:
    """Convert minutes to decimal hours with 2 decimal precision.

    Args:
        minutes: Number of minutes

    Returns:
        Decimal hours (rounded half up to 2 decimal places)

    Example:
        >>> minutes_to_decimal_hours(120)
        Decimal('2.00')
        >>> minutes_to_decimal_hours(45)
        Decimal('0.75')
        >>> minutes_to_decimal_hours(10)
        Decimal('0.17')
    """
    hours = Decimal(minutes) / Decimal("60")
    return hours.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)

"""Calculator modules for the time ledger."""

from timeledger.calculators.billing_calculator import (
    calculate_billable_amount,
    calculate_hours_amount,
    calculate_rate_minutes,
    round_amount,
)
from timeledger.calculators.time_utils import (
    calculate_duration_minutes,
    calculate_entry_minutes,
    minutes_to_decimal_hours,
    parse_clock_minutes,
)

__all__ = [
    # billing_calculator
    "calculate_billable_amount",
    "calculate_hours_amount",
    "calculate_rate_minutes",
    "round_amount",
    # time_utils
    "calculate_duration_minutes",
    "calculate_entry_minutes",
    "minutes_to_decimal_hours",
    "parse_clock_minutes",
]

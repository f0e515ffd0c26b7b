"""Time tracking ledger: feed grouping, yearly reports and ledger exports."""

__version__ = "1.0.0"

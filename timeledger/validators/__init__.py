"""Validation layer for snapshot data integrity."""

from timeledger.validators.snapshot_validator import SnapshotValidator, validate_snapshot
from timeledger.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "SnapshotValidator",
    "ValidationReport",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_snapshot",
]

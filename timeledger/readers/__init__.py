"""Readers for loading workspace snapshots."""

from timeledger.readers.snapshot_reader import SnapshotError, SnapshotReader

__all__ = ["SnapshotError", "SnapshotReader"]

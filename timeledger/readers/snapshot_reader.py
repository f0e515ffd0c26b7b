"""Snapshot reader for loading entity collections from JSON.

This module reads a JSON export of the external store into a validated
WorkspaceSnapshot. Individual records that fail validation are logged,
recorded in a ValidationReport and skipped; a collection that is not a
list at all is a contract violation and raises SnapshotError.

Expected document shape::

    {
        "entries":  [{"id": ..., "project": ..., "date": "2024-03-10",
                      "startTime": "09:00", "endTime": "11:00", ...}],
        "projects": [...],
        "clients":  [...],
        "licenses": [...],
        "servers":  [...],
        "domains":  [...],
        "settings": {"currency": "EUR", "currencyLocale": "fr-FR"}
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from timeledger.models.cost_item import CostItem
from timeledger.models.project import Client, Project
from timeledger.models.settings import WorkspaceSettings
from timeledger.models.snapshot import WorkspaceSnapshot
from timeledger.models.time_entry import TimeEntry
from timeledger.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)

COLLECTIONS: Tuple[Tuple[str, Type[BaseModel]], ...] = (
    ("entries", TimeEntry),
    ("projects", Project),
    ("clients", Client),
    ("licenses", CostItem),
    ("servers", CostItem),
    ("domains", CostItem),
)


class SnapshotError(Exception):
    """Raised when a snapshot document is not shaped like a snapshot."""


class SnapshotReader:
    """Reader for workspace snapshot documents.

    Attributes:
        report: Issues found while parsing the last document

    Example:
        >>> reader = SnapshotReader()
        >>> snapshot = reader.read("snapshot.json")
        >>> len(snapshot.entries)
        42
        >>> reader.report.summary()
        'No issues found'
    """

    def __init__(self) -> None:
        """Initialize the reader with an empty report."""
        self.report = ValidationReport()

    def read(self, path: Union[str, Path]) -> WorkspaceSnapshot:
        """Read and parse a snapshot file.

        Args:
            path: Path of the JSON document

        Returns:
            Validated WorkspaceSnapshot

        Raises:
            SnapshotError: If the file cannot be read or is not valid JSON
        """
        path = Path(path)
        logger.info(f"Reading snapshot from {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Snapshot {path} is not valid JSON: {e}") from e

        return self.parse(data)

    def parse(self, data: Any) -> WorkspaceSnapshot:
        """Parse an already-loaded snapshot document.

        Args:
            data: Mapping with the collection lists

        Returns:
            Validated WorkspaceSnapshot

        Raises:
            SnapshotError: If data or one of its collections has the wrong type
        """
        self.report = ValidationReport()

        if not isinstance(data, Mapping):
            raise SnapshotError(
                f"Snapshot must be a JSON object, got {type(data).__name__}"
            )

        collections: Dict[str, Any] = {}
        for name, model in COLLECTIONS:
            collections[name] = self._parse_collection(name, model, data.get(name))

        if data.get("settings") is not None:
            settings = self._parse_settings(data["settings"])
            if settings is not None:
                collections["settings"] = settings

        snapshot = WorkspaceSnapshot(**collections)
        logger.info(
            f"Loaded snapshot: {len(snapshot.entries)} entries, "
            f"{len(snapshot.projects)} projects, {len(snapshot.clients)} clients, "
            f"{len(snapshot.licenses) + len(snapshot.servers) + len(snapshot.domains)} "
            f"cost items"
        )
        if self.report.issues:
            logger.warning(f"Skipped invalid records: {self.report.summary()}")
        return snapshot

    def _parse_collection(
        self, name: str, model: Type[BaseModel], raw: Any
    ) -> List[BaseModel]:
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise SnapshotError(
                f"Collection '{name}' must be a list, got {type(raw).__name__}"
            )

        records = []
        for index, item in enumerate(raw):
            record = self._parse_record(name, model, index, item)
            if record is not None:
                records.append(record)
        return records

    def _parse_record(
        self, name: str, model: Type[BaseModel], index: int, item: Any
    ) -> Optional[BaseModel]:
        record_id = item.get("id") if isinstance(item, Mapping) else None
        try:
            return model.model_validate(item)
        except ValidationError as e:
            for error in e.errors():
                location = ".".join(str(part) for part in error["loc"]) or "record"
                self.report.add_error(
                    f"{name}.{location}",
                    error["msg"],
                    error.get("input"),
                    {"index": index, "id": record_id},
                )
            logger.warning(
                f"Skipping invalid {name} record at index {index} "
                f"(id={record_id}): {e.error_count()} error(s)"
            )
            return None

    def _parse_settings(self, raw: Any) -> Optional[WorkspaceSettings]:
        """Validate the workspace settings, or None when they are unusable.

        Without settings the snapshot reports ``has_settings`` as False, so
        the configured currency settings apply instead.
        """
        try:
            return WorkspaceSettings.model_validate(raw)
        except ValidationError as e:
            self.report.add_warning(
                "settings", "Invalid workspace settings, using configured ones", raw
            )
            logger.warning(
                f"Invalid workspace settings, using configured ones: "
                f"{e.error_count()} error(s)"
            )
            return None

"""Data-integrity checks for workspace snapshots.

None of these findings stop the engine: dangling references are simply
left out of project-keyed output and malformed times count as zero. The
validator makes them visible so they can be fixed in the store.
"""

import logging
import re
from collections import Counter
from typing import Iterable

from timeledger.models.cost_item import CostCategory
from timeledger.models.snapshot import WorkspaceSnapshot
from timeledger.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)

CLOCK_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class SnapshotValidator:
    """Validates cross-record consistency of a WorkspaceSnapshot.

    Checks:
    - Duplicate ids within a collection (error)
    - Time entries or cost items referencing unknown projects (error)
    - Malformed "HH:MM" start or end times (warning)
    - Cost item client names disagreeing with their project (warning)
    - Project clients missing from the client catalog (warning)

    Example:
        >>> report = SnapshotValidator().validate(snapshot)
        >>> report.is_valid()
        True
    """

    def validate(self, snapshot: WorkspaceSnapshot) -> ValidationReport:
        """Run all checks on a snapshot.

        Args:
            snapshot: Workspace snapshot

        Returns:
            ValidationReport with every issue found
        """
        report = ValidationReport()

        self._check_duplicate_ids("entries", (e.id for e in snapshot.entries), report)
        self._check_duplicate_ids("projects", (p.id for p in snapshot.projects), report)
        self._check_duplicate_ids("clients", (c.id for c in snapshot.clients), report)
        for category in CostCategory:
            self._check_duplicate_ids(
                category.value,
                (item.id for item in snapshot.cost_items(category)),
                report,
            )

        self._check_entries(snapshot, report)
        self._check_cost_items(snapshot, report)
        self._check_project_clients(snapshot, report)

        logger.info(f"Snapshot validation: {report.summary()}")
        return report

    def _check_duplicate_ids(
        self, collection: str, ids: Iterable[str], report: ValidationReport
    ) -> None:
        for record_id, count in Counter(ids).items():
            if count > 1:
                report.add_error(
                    f"{collection}.id",
                    f"Id used by {count} records",
                    record_id,
                )

    def _check_entries(self, snapshot: WorkspaceSnapshot, report: ValidationReport) -> None:
        projects = snapshot.project_index()
        for entry in snapshot.entries:
            if entry.project not in projects:
                report.add_error(
                    "entries.project",
                    "References a project that does not exist",
                    entry.project,
                    {"entry": entry.id},
                )
            for field_name in ("start_time", "end_time"):
                value = getattr(entry, field_name)
                if not CLOCK_PATTERN.match(value):
                    report.add_warning(
                        f"entries.{field_name}",
                        "Not a zero-padded HH:MM time, invalid components count as zero",
                        value,
                        {"entry": entry.id},
                    )

    def _check_cost_items(
        self, snapshot: WorkspaceSnapshot, report: ValidationReport
    ) -> None:
        projects = snapshot.project_index()
        for category in CostCategory:
            for item in snapshot.cost_items(category):
                project = projects.get(item.project)
                if project is None:
                    report.add_error(
                        f"{category.value}.project",
                        "References a project that does not exist",
                        item.project,
                        {"item": item.id},
                    )
                elif (project.client or "") != item.client:
                    report.add_warning(
                        f"{category.value}.client",
                        f"Client differs from project client '{project.client or ''}'",
                        item.client,
                        {"item": item.id},
                    )

    def _check_project_clients(
        self, snapshot: WorkspaceSnapshot, report: ValidationReport
    ) -> None:
        client_names = {client.name for client in snapshot.clients}
        for project in snapshot.projects:
            if project.client is not None and project.client not in client_names:
                report.add_warning(
                    "projects.client",
                    "Client is not in the client catalog",
                    project.client,
                    {"project": project.id},
                )


def validate_snapshot(snapshot: WorkspaceSnapshot) -> ValidationReport:
    """Convenience wrapper around SnapshotValidator.validate."""
    return SnapshotValidator().validate(snapshot)


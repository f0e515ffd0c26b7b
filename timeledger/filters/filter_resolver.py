"""Resolution of the project set a report is scoped to.

The client selector narrows the project catalog to the *available*
projects. The caller's chosen project subset is then intersected with
that set on every call, so ids left over from an earlier client
selection can never leak into totals.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Sequence

from timeledger.models.filters import ALL_CLIENTS, NO_CLIENT
from timeledger.models.project import Client, Project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedFilter:
    """Result of resolving a client selector and project selection.

    Attributes:
        available_projects: Projects matching the client selector, sorted by
            client name then project name (projects without client last)
        active_project_ids: Chosen ids that are still available
    """

    available_projects: List[Project]
    active_project_ids: FrozenSet[str]

    @property
    def available_project_ids(self) -> FrozenSet[str]:
        """Ids of all available projects."""
        return frozenset(project.id for project in self.available_projects)


def _project_sort_key(project: Project):
    return (
        project.client is None,
        (project.client or "").casefold(),
        project.name.casefold(),
        project.id,
    )


class FilterResolver:
    """Computes available and active project sets for a client selector.

    Example:
        >>> resolver = FilterResolver()
        >>> projects = [
        ...     Project(id="p1", name="Website", client="Acme"),
        ...     Project(id="p2", name="Intranet", client="Globex"),
        ... ]
        >>> clients = [Client(id="c1", name="Acme"), Client(id="c2", name="Globex")]
        >>> resolved = resolver.resolve(projects, clients, "c1", {"p1", "p2"})
        >>> sorted(resolved.active_project_ids)
        ['p1']
    """

    def find_client(
        self, clients: Iterable[Client], client_selector: str
    ) -> Optional[Client]:
        """Find the client a selector refers to.

        Args:
            clients: Client catalog
            client_selector: A client id (client names are accepted too)

        Returns:
            The matching client, or None if it is not in the catalog
        """
        clients = list(clients)
        for client in clients:
            if client.id == client_selector:
                return client
        for client in clients:
            if client.name == client_selector:
                return client
        return None

    def available_projects(
        self,
        projects: Iterable[Project],
        clients: Iterable[Client],
        client_selector: str = ALL_CLIENTS,
    ) -> List[Project]:
        """Filter the project catalog by client selector.

        Args:
            projects: Project catalog
            clients: Client catalog
            client_selector: "all", "no-client", or a client id

        Returns:
            Matching projects sorted by client name then project name,
            projects without client sorting last
        """
        if client_selector == ALL_CLIENTS:
            filtered = list(projects)
        elif client_selector == NO_CLIENT:
            filtered = [p for p in projects if p.client is None]
        else:
            client = self.find_client(clients, client_selector)
            if client is None:
                logger.debug(f"Unknown client selector: {client_selector}")
                filtered = []
            else:
                filtered = [p for p in projects if p.client == client.name]

        return sorted(filtered, key=_project_sort_key)

    def default_selection(self, available_projects: Sequence[Project]) -> FrozenSet[str]:
        """Selection to use after the client selector changes: everything."""
        return frozenset(project.id for project in available_projects)

    def reconcile(
        self,
        available_projects: Sequence[Project],
        selected_project_ids: Optional[Iterable[str]],
    ) -> FrozenSet[str]:
        """Intersect a chosen project selection with the available projects.

        Args:
            available_projects: Projects available under the client selector
            selected_project_ids: Chosen ids, or None to select all available

        Returns:
            The active project id set
        """
        available_ids = self.default_selection(available_projects)
        if selected_project_ids is None:
            return available_ids

        selected = frozenset(selected_project_ids)
        stale = selected - available_ids
        if stale:
            logger.debug(f"Dropping {len(stale)} project id(s) outside the client filter")
        return selected & available_ids

    def resolve(
        self,
        projects: Iterable[Project],
        clients: Iterable[Client],
        client_selector: str = ALL_CLIENTS,
        selected_project_ids: Optional[Iterable[str]] = None,
    ) -> ResolvedFilter:
        """Resolve available projects and the reconciled active selection.

        Args:
            projects: Project catalog
            clients: Client catalog
            client_selector: "all", "no-client", or a client id
            selected_project_ids: Chosen ids, or None to select all available

        Returns:
            ResolvedFilter with available projects and active ids
        """
        available = self.available_projects(projects, clients, client_selector)
        active = self.reconcile(available, selected_project_ids)
        return ResolvedFilter(available_projects=available, active_project_ids=active)

    def client_filter_name(self, clients: Iterable[Client], client_selector: str) -> str:
        """Display name of a client selector.

        Example:
            >>> FilterResolver().client_filter_name([], "no-client")
            'Internal / No Client'
        """
        if client_selector == ALL_CLIENTS:
            return "All Clients"
        if client_selector == NO_CLIENT:
            return "Internal / No Client"
        client = self.find_client(clients, client_selector)
        return client.name if client else "Unknown Client"


def selectable_projects(projects: Iterable[Project]) -> List[Project]:
    """Projects offered in selection lists (active ones only)."""
    return [project for project in projects if project.active]


def toggle_project(selected: Iterable[str], project_id: str) -> FrozenSet[str]:
    """Add or remove one project id from a selection.

    Example:
        >>> sorted(toggle_project({"p1", "p2"}, "p2"))
        ['p1']
    """
    selected = frozenset(selected)
    if project_id in selected:
        return selected - {project_id}
    return selected | {project_id}


def toggle_all_projects(
    selected: Iterable[str], available_projects: Sequence[Project]
) -> FrozenSet[str]:
    """Select every available project, or none if all are selected already."""
    selected = frozenset(selected)
    if len(selected) == len(available_projects):
        return frozenset()
    return frozenset(project.id for project in available_projects)

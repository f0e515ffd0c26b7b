"""In-memory snapshot of a workspace's entity collections."""

from typing import Dict, List

from pydantic import Field

from timeledger.models.base import BaseDataModel
from timeledger.models.cost_item import CostCategory, CostItem
from timeledger.models.project import Client, Project
from timeledger.models.settings import WorkspaceSettings
from timeledger.models.time_entry import TimeEntry


class WorkspaceSnapshot(BaseDataModel):
    """Materialized collections handed to the engine.

    The caller owns the snapshot; whenever the store reports a change it
    builds a new one and re-runs the engine on it.

    Attributes:
        entries: Time entries
        projects: Project catalog
        clients: Client catalog
        licenses: License cost items
        servers: Server cost items
        domains: Domain cost items
        settings: Currency settings for display
    """

    entries: List[TimeEntry] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    clients: List[Client] = Field(default_factory=list)
    licenses: List[CostItem] = Field(default_factory=list)
    servers: List[CostItem] = Field(default_factory=list)
    domains: List[CostItem] = Field(default_factory=list)
    settings: WorkspaceSettings = Field(default_factory=WorkspaceSettings)

    def cost_items(self, category: CostCategory) -> List[CostItem]:
        """Get the cost items of one category."""
        return {
            CostCategory.LICENSES: self.licenses,
            CostCategory.SERVERS: self.servers,
            CostCategory.DOMAINS: self.domains,
        }[category]

    def project_index(self) -> Dict[str, Project]:
        """Map project ids to projects."""
        return {project.id: project for project in self.projects}

    @property
    def has_settings(self) -> bool:
        """Whether the document carried its own workspace settings."""
        return "settings" in self.model_fields_set

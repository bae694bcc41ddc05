"""Project records."""

from typing import Any, Optional

from freelance_ledger.log import get_logger
from freelance_ledger.models import Project, ProjectFilters, ProjectStatus
from freelance_ledger.queries.filters import filter_projects
from freelance_ledger.services.records import RecordCollection
from freelance_ledger.services.storage import RecordStore, StorageKey

logger = get_logger(__name__)


class ProjectService:
    """CRUD for projects. New projects always start as prospects."""

    def __init__(self, store: RecordStore):
        self._projects: RecordCollection[Project] = RecordCollection(
            store, StorageKey.PROJECTS, Project,
        )

    def list_projects(self, filters: Optional[ProjectFilters] = None) -> list[Project]:
        projects = self._projects.all()
        return filter_projects(projects, filters) if filters else projects

    def get_project(self, project_id: str) -> Optional[Project]:
        return self._projects.get(project_id)

    def projects_for_client(self, client_id: str) -> list[Project]:
        return self._projects.where(client_id=client_id)

    def add_project(self, name: str, **fields: Any) -> Project:
        """
        Add a project in PROSPECT status.

        Any status passed in is ignored.

        Raises:
            pydantic.ValidationError: If the name is blank or the dates are inverted
        """
        fields["status"] = ProjectStatus.PROSPECT
        project = self._projects.add(Project(name=name, **fields))
        logger.info("project_added", project_id=project.id, client_id=project.client_id)
        return project

    def update_project(self, project_id: str, **changes: Any) -> Project:
        project = self._projects.update(project_id, changes)
        logger.info("project_updated", project_id=project_id, fields=sorted(changes))
        return project

    def delete_project(self, project_id: str) -> Project:
        project = self._projects.remove(project_id)
        logger.info("project_deleted", project_id=project_id)
        return project

"""Projects resource client for taskboard."""

import logging
from typing import List, Optional

from taskboard.integrations.api_client import ApiClient
from taskboard.models.project import ProjectDto, CreateProjectCommand, UpdateProjectCommand

logger = logging.getLogger(__name__)

PROJECTS_ENDPOINT = "/Projects"


def _project_or_none(data) -> Optional[ProjectDto]:
    return ProjectDto.model_validate(data) if data is not None else None


class ProjectsApi:
    """One method per project operation, each mapped to a single HTTP call."""

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()

    def list_projects(self) -> List[ProjectDto]:
        data = self.client.request(PROJECTS_ENDPOINT)
        return [ProjectDto.model_validate(item) for item in data or []]

    def get_project(self, project_id: str) -> ProjectDto:
        data = self.client.request(f"{PROJECTS_ENDPOINT}/{project_id}")
        return ProjectDto.model_validate(data)

    def create_project(self, command: CreateProjectCommand) -> Optional[ProjectDto]:
        data = self.client.request(PROJECTS_ENDPOINT, "POST", command.model_dump(by_alias=True))
        logger.debug(f"Created project {command.name[:50]}")
        return _project_or_none(data)

    def update_project(self, project_id: str, command: UpdateProjectCommand) -> Optional[ProjectDto]:
        """Update a project; the API may answer 204, in which case None is returned."""
        data = self.client.request(f"{PROJECTS_ENDPOINT}/{project_id}", "PUT", command.model_dump(by_alias=True))
        logger.debug(f"Updated project {project_id}")
        return _project_or_none(data)

    def delete_project(self, project_id: str) -> None:
        self.client.request(f"{PROJECTS_ENDPOINT}/{project_id}", "DELETE")
        logger.debug(f"Deleted project {project_id}")

"""Tasks resource client for taskboard."""

import logging
from typing import List, Optional

from taskboard.engine.mutators import with_status, with_assignee
from taskboard.integrations.api_client import ApiClient
from taskboard.models.task import (
    TaskItemDto,
    TaskStatus,
    CreateTaskCommand,
    UpdateTaskCommand,
)

logger = logging.getLogger(__name__)

TASKS_ENDPOINT = "/TaskItems"
TASKS_BY_PROJECT_ENDPOINT = "/TaskItems/project"


def _task_or_none(data) -> Optional[TaskItemDto]:
    return TaskItemDto.model_validate(data) if data is not None else None


class TasksApi:
    """One method per task operation, each mapped to a single HTTP call."""

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()

    def list_tasks_by_project(self, project_id: str) -> List[TaskItemDto]:
        data = self.client.request(f"{TASKS_BY_PROJECT_ENDPOINT}/{project_id}")
        return [TaskItemDto.model_validate(item) for item in data or []]

    def get_task(self, task_id: str) -> TaskItemDto:
        data = self.client.request(f"{TASKS_ENDPOINT}/{task_id}")
        return TaskItemDto.model_validate(data)

    def create_task(self, command: CreateTaskCommand) -> Optional[TaskItemDto]:
        data = self.client.request(TASKS_ENDPOINT, "POST", command.model_dump(by_alias=True))
        logger.debug(f"Created task in project {command.project_id}: {command.title[:50]}")
        return _task_or_none(data)

    def update_task(self, task_id: str, command: UpdateTaskCommand) -> Optional[TaskItemDto]:
        """Update a task; the API may answer 204, in which case None is returned."""
        data = self.client.request(f"{TASKS_ENDPOINT}/{task_id}", "PUT", command.model_dump(by_alias=True))
        logger.debug(f"Updated task {task_id}: {command.title[:50]}")
        return _task_or_none(data)

    def delete_task(self, task_id: str) -> None:
        self.client.request(f"{TASKS_ENDPOINT}/{task_id}", "DELETE")
        logger.debug(f"Deleted task {task_id}")

    def change_task_status(self, task: TaskItemDto, status: TaskStatus) -> Optional[TaskItemDto]:
        """Send task back with only its status changed.

        Dates are sent as found on ``task``; reformat them first if the record
        came straight from a list/get call.
        """
        return self.update_task(task.id, with_status(task, status))

    def assign_task(self, task: TaskItemDto, user_id: Optional[str]) -> Optional[TaskItemDto]:
        """Send task back with only its assignee changed (None unassigns)."""
        return self.update_task(task.id, with_assignee(task, user_id))

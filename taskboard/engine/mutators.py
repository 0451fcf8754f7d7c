"""Single-field update helpers for existing tasks.

Each helper copies a task record into an UpdateTaskCommand with one field
overridden. The record is assumed valid and its dates are copied verbatim,
so run ``format_task_dates`` on records straight from the API first.
"""

from typing import Any, Optional

from taskboard.models.task import TaskItemDto, TaskStatus, UpdateTaskCommand


def _update_from_task(task: TaskItemDto, **overrides: Any) -> UpdateTaskCommand:
    fields = {
        "id": task.id,
        "project_id": task.project_id,
        "title": task.title,
        "description": task.description,
        "due_date": task.due_date,
        "status": task.status,
        "priority": task.priority,
        "completion_date": task.completion_date,
        "assigned_to_user_id": task.assigned_to_user_id,
    }
    fields.update(overrides)
    return UpdateTaskCommand(**fields)


def with_status(task: TaskItemDto, status: TaskStatus) -> UpdateTaskCommand:
    """Copy task into an update command with a new status."""
    return _update_from_task(task, status=status)


def with_assignee(task: TaskItemDto, user_id: Optional[str]) -> UpdateTaskCommand:
    """Copy task into an update command with a new assignee (None unassigns)."""
    return _update_from_task(task, assigned_to_user_id=user_id)

"""Form creation factory for taskboard.

This module centralizes how forms are opened: empty defaults for create mode,
or a copy of an existing record for edit mode. Date fields coming from the
remote API are ISO 8601 timestamps; forms and commands use YYYY-MM-DD.
"""

from datetime import date, datetime, timezone
from typing import Optional
from dateutil import parser

from taskboard.models.project import ProjectDto
from taskboard.models.project_form import CreateProjectForm, EditProjectForm
from taskboard.models.task import TaskItemDto
from taskboard.models.task_form import CreateTaskForm, EditTaskForm


def today_utc() -> date:
    """Return the current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def _parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 date or timestamp as sent by the remote API."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        # Older interpreters reject 7-digit fractions and compact offsets
        return parser.isoparse(value)


def to_date_string(value: Optional[str]) -> Optional[str]:
    """Reformat an ISO 8601 date or timestamp to YYYY-MM-DD (UTC).

    Timestamps carrying an offset are converted to UTC before the date is
    taken; naive timestamps are taken as-is.

    Args:
        value: Date or timestamp string, e.g. "2025-12-31T00:00:00Z"

    Returns:
        The date as YYYY-MM-DD, or None when value is empty

    Raises:
        ValueError: If value is not an ISO 8601 date or timestamp
    """
    if not value:
        return None

    parsed = _parse_timestamp(value.strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def new_task_form(project_id: Optional[str] = None, today: Optional[date] = None) -> CreateTaskForm:
    """Open an empty create form; the due date defaults to today."""
    today = today or today_utc()
    return CreateTaskForm(
        project_id=project_id,
        title=None,
        description=None,
        due_date=today.isoformat(),
        assigned_to_user_id=None,
    )


def edit_form_from_task(task: TaskItemDto) -> EditTaskForm:
    """Open an edit form copied from an existing task.

    Args:
        task: Task as returned by the remote API

    Returns:
        EditTaskForm with dates reformatted to YYYY-MM-DD
    """
    return EditTaskForm(
        id=task.id,
        project_id=task.project_id,
        title=task.title,
        description=task.description,
        due_date=to_date_string(task.due_date),
        status=task.status,
        priority=task.priority,
        completion_date=to_date_string(task.completion_date),
        assigned_to_user_id=task.assigned_to_user_id,
    )


def format_task_dates(task: TaskItemDto) -> TaskItemDto:
    """Return a copy of task with due/completion dates as YYYY-MM-DD.

    Commands derived from a task record expect this format, so callers run it
    before handing a record to the status or assignment helpers.
    """
    return task.model_copy(
        update={
            "due_date": to_date_string(task.due_date) or "",
            "completion_date": to_date_string(task.completion_date),
        }
    )


def new_project_form(today: Optional[date] = None) -> CreateProjectForm:
    """Open an empty project create form starting today."""
    today = today or today_utc()
    return CreateProjectForm(name=None, description=None, start_date=today.isoformat(), end_date=None)


def edit_form_from_project(project: ProjectDto) -> EditProjectForm:
    """Open an edit form copied from an existing project."""
    return EditProjectForm(
        id=project.id,
        name=project.name,
        description=project.description,
        start_date=to_date_string(project.start_date),
        end_date=to_date_string(project.end_date),
        status=project.status,
    )

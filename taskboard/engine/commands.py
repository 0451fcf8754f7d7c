"""Command projection for taskboard.

Projects a validated form into the command the remote API expects. The form's
mode decides the command shape. Projection trusts its input: callers validate
first (see ``build_task_command`` for the submit path that does both).
"""

from datetime import date
from typing import Optional, Tuple, Union

from taskboard.engine.validation import FieldErrors, validate_identifiers, validate_task_form
from taskboard.models.project import CreateProjectCommand, UpdateProjectCommand
from taskboard.models.project_form import EditProjectForm, ProjectFormState
from taskboard.models.task import CreateTaskCommand, UpdateTaskCommand
from taskboard.models.task_form import EditTaskForm, TaskFormState

TaskCommand = Union[CreateTaskCommand, UpdateTaskCommand]
ProjectCommand = Union[CreateProjectCommand, UpdateProjectCommand]


def to_task_command(form: TaskFormState) -> TaskCommand:
    """Project a valid task form into a create or update command.

    Args:
        form: Form state with no validation errors

    Returns:
        UpdateTaskCommand for edit forms, CreateTaskCommand otherwise
    """
    if isinstance(form, EditTaskForm):
        return UpdateTaskCommand(
            id=form.id,
            project_id=form.project_id,
            title=form.title,
            description=form.description,
            due_date=form.due_date,
            status=form.status,
            priority=form.priority,
            completion_date=form.completion_date,
            assigned_to_user_id=form.assigned_to_user_id,
        )
    return CreateTaskCommand(
        project_id=form.project_id,
        title=form.title,
        description=form.description,
        due_date=form.due_date,
        assigned_to_user_id=form.assigned_to_user_id,
    )


def build_task_command(
    form: TaskFormState, today: Optional[date] = None
) -> Tuple[Optional[TaskCommand], FieldErrors]:
    """Validate a form and project it only if it has no errors.

    Besides the user-facing field checks, the submit path also requires the
    identifiers the command carries (``projectId``, and ``id`` when editing).

    Args:
        form: Create or edit form state
        today: Current date (defaults to today in UTC)

    Returns:
        Tuple of (command or None, errors)
    """
    errors = {**validate_identifiers(form), **validate_task_form(form, today=today)}
    if errors:
        return None, errors
    return to_task_command(form), errors


def to_project_command(form: ProjectFormState) -> ProjectCommand:
    """Project a project form into a create or update command."""
    if isinstance(form, EditProjectForm):
        return UpdateProjectCommand(
            id=form.id,
            name=form.name,
            description=form.description,
            start_date=form.start_date,
            end_date=form.end_date,
            status=form.status,
        )
    return CreateProjectCommand(
        name=form.name,
        description=form.description,
        start_date=form.start_date,
        end_date=form.end_date,
    )

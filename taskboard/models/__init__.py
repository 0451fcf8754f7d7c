"""Data models for taskboard."""

from taskboard.models.task import (
    TaskItemDto,
    TaskStatus,
    TaskPriority,
    CreateTaskCommand,
    UpdateTaskCommand,
)
from taskboard.models.project import ProjectDto, CreateProjectCommand, UpdateProjectCommand
from taskboard.models.user import UserDto
from taskboard.models.task_form import CreateTaskForm, EditTaskForm, TaskFormState
from taskboard.models.project_form import CreateProjectForm, EditProjectForm, ProjectFormState

__all__ = [
    "TaskItemDto",
    "TaskStatus",
    "TaskPriority",
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "ProjectDto",
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "UserDto",
    "CreateTaskForm",
    "EditTaskForm",
    "TaskFormState",
    "CreateProjectForm",
    "EditProjectForm",
    "ProjectFormState",
]

"""Pytest fixtures and configuration for taskboard tests."""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from taskboard.models.project import ProjectDto
from taskboard.models.task import TaskItemDto
from taskboard.models.task_form import CreateTaskForm, EditTaskForm


PROJECT_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"
TASK_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
USER_ID = "a1b2c3d4-e5f6-7890-abcd-ef1234567890"


@pytest.fixture
def today():
    """Fixed 'current date' so date checks do not depend on the wall clock."""
    return date(2026, 1, 26)


@pytest.fixture
def sample_task_base():
    """Task record as the remote API returns it (camelCase, ISO timestamps).

    Returns a dict that can be overridden per test.
    """
    return {
        "id": TASK_ID,
        "projectId": PROJECT_ID,
        "projectName": "Website relaunch",
        "title": "Write release notes",
        "description": "Summarize the changes for the changelog",
        "dueDate": "2026-02-01T00:00:00Z",
        "status": "Pending",
        "priority": "Medium",
        "completionDate": None,
        "assignedToUserId": None,
        "assignedToUserName": None,
        "creationDate": "2026-01-20T09:15:00Z",
        "lastModifiedDate": "2026-01-21T10:00:00Z",
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample TaskItemDto for testing."""
    return TaskItemDto.model_validate(sample_task_base)


@pytest.fixture
def sample_project():
    return ProjectDto.model_validate(
        {
            "id": PROJECT_ID,
            "name": "Website relaunch",
            "description": "New marketing site",
            "startDate": "2026-01-05T00:00:00Z",
            "endDate": None,
            "status": "Active",
        }
    )


@pytest.fixture
def valid_create_form(today):
    """Create-mode form that passes every check."""
    return CreateTaskForm(
        project_id=PROJECT_ID,
        title="Write release notes",
        description="Summarize the changes",
        due_date=today.isoformat(),
        assigned_to_user_id=None,
    )


@pytest.fixture
def valid_edit_form(today):
    """Edit-mode form that passes every check."""
    return EditTaskForm(
        id=TASK_ID,
        project_id=PROJECT_ID,
        title="Write release notes",
        description=None,
        due_date="2026-02-01",
        status="InProgress",
        priority="High",
        completion_date=None,
        assigned_to_user_id=USER_ID,
    )


@pytest.fixture
def projects_api():
    """Mock ProjectsApi (no network)."""
    return MagicMock()


@pytest.fixture
def tasks_api():
    """Mock TasksApi (no network)."""
    return MagicMock()


@pytest.fixture
def test_client(projects_api, tasks_api, today):
    """Create a FastAPI test client with resource clients and the clock overridden."""
    from taskboard.api.app import app, get_projects_api, get_tasks_api, get_today

    app.dependency_overrides[get_projects_api] = lambda: projects_api
    app.dependency_overrides[get_tasks_api] = lambda: tasks_api
    app.dependency_overrides[get_today] = lambda: today

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()

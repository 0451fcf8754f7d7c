"""Task data models for taskboard.

Read models (DTOs) mirror what the remote API returns; commands are the
immutable payloads sent to create or update a task. Both use camelCase on the
wire and snake_case in Python.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


class TaskPriority(str, Enum):
    """Task priority enumeration."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskItemDto(BaseModel):
    """Task as returned by list/get operations."""

    id: str = Field(..., description="Task identifier (GUID)")
    project_id: str = Field(..., alias="projectId", description="Owning project identifier")
    project_name: Optional[str] = Field(None, alias="projectName", description="Owning project name")
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    due_date: str = Field(..., alias="dueDate", description="Due date (ISO 8601)")
    status: str = Field(..., description="Task status name")
    priority: str = Field(..., description="Task priority name")
    completion_date: Optional[str] = Field(None, alias="completionDate", description="Completion date (ISO 8601)")
    assigned_to_user_id: Optional[str] = Field(None, alias="assignedToUserId", description="Assignee identifier")
    assigned_to_user_name: Optional[str] = Field(None, alias="assignedToUserName", description="Assignee name")
    creation_date: Optional[str] = Field(None, alias="creationDate", description="Server creation timestamp")
    last_modified_date: Optional[str] = Field(None, alias="lastModifiedDate", description="Server update timestamp")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class CreateTaskCommand(BaseModel):
    """Payload for creating a task. Status and priority are assigned by the server."""

    project_id: str = Field(..., alias="projectId")
    title: str
    description: Optional[str] = None
    due_date: str = Field(..., alias="dueDate", description="Due date (YYYY-MM-DD)")
    assigned_to_user_id: Optional[str] = Field(None, alias="assignedToUserId")

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True


class UpdateTaskCommand(BaseModel):
    """Payload for updating a task."""

    id: str
    project_id: str = Field(..., alias="projectId")
    title: str
    description: Optional[str] = None
    due_date: str = Field(..., alias="dueDate", description="Due date (YYYY-MM-DD)")
    status: TaskStatus
    priority: TaskPriority
    completion_date: Optional[str] = Field(None, alias="completionDate", description="Completion date (YYYY-MM-DD)")
    assigned_to_user_id: Optional[str] = Field(None, alias="assignedToUserId")

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True
        use_enum_values = True

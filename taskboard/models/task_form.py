"""Task form state for taskboard.

A task form is either a create form or an edit form, tagged by ``mode``.
Fields hold raw user input, so every value is an optional string until the
form has been validated. An empty string always means "not provided".
"""

from typing import Annotated, Any, Literal, Optional, Union, get_args
from pydantic import BaseModel, Field, model_validator


class _TaskFormFields(BaseModel):
    """Fields shared by both task form modes."""

    project_id: Optional[str] = Field(None, alias="projectId")
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = Field(None, alias="dueDate", description="YYYY-MM-DD")
    assigned_to_user_id: Optional[str] = Field(None, alias="assignedToUserId")

    @model_validator(mode="before")
    @classmethod
    def _empty_strings_are_absent(cls, data: Any) -> Any:
        # The mode tag is left alone so the union can still dispatch on it
        if isinstance(data, dict):
            return {key: (None if value == "" and key != "mode" else value) for key, value in data.items()}
        return data

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class CreateTaskForm(_TaskFormFields):
    """Form state for a task that does not exist yet."""

    mode: Literal["create"] = "create"


class EditTaskForm(_TaskFormFields):
    """Form state for an existing task."""

    mode: Literal["edit"] = "edit"
    id: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    completion_date: Optional[str] = Field(None, alias="completionDate", description="YYYY-MM-DD")


TaskFormState = Annotated[Union[CreateTaskForm, EditTaskForm], Field(discriminator="mode")]

# Wire names of the inputs a user can edit
TaskFormField = Literal[
    "projectId",
    "title",
    "description",
    "dueDate",
    "assignedToUserId",
    "status",
    "priority",
    "completionDate",
]
TASK_FORM_FIELDS = get_args(TaskFormField)

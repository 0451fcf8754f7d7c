"""Project form state for taskboard."""

from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field, model_validator


class _ProjectFormFields(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = Field(None, alias="startDate", description="YYYY-MM-DD")
    end_date: Optional[str] = Field(None, alias="endDate", description="YYYY-MM-DD")

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


class CreateProjectForm(_ProjectFormFields):
    mode: Literal["create"] = "create"


class EditProjectForm(_ProjectFormFields):
    mode: Literal["edit"] = "edit"
    id: Optional[str] = None
    status: Optional[str] = None


ProjectFormState = Annotated[Union[CreateProjectForm, EditProjectForm], Field(discriminator="mode")]

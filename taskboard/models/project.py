"""Project data models for taskboard."""

from typing import Optional
from pydantic import BaseModel, Field


class ProjectDto(BaseModel):
    """Project as returned by list/get operations."""

    id: str = Field(..., description="Project identifier (GUID)")
    name: str = Field(..., description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    start_date: str = Field(..., alias="startDate", description="Start date (ISO 8601)")
    end_date: Optional[str] = Field(None, alias="endDate", description="End date (ISO 8601)")
    status: str = Field(..., description="Project status name")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


class CreateProjectCommand(BaseModel):
    """Payload for creating a project."""

    name: str
    description: Optional[str] = None
    start_date: str = Field(..., alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True


class UpdateProjectCommand(BaseModel):
    """Payload for updating a project."""

    id: str
    name: str
    description: Optional[str] = None
    start_date: str = Field(..., alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    status: str

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True

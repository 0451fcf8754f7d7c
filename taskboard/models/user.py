"""User data model for taskboard."""

from pydantic import BaseModel, Field


class UserDto(BaseModel):
    """User as returned by the remote API."""

    id: str = Field(..., description="User identifier (GUID)")
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    username: str
    role: str
    is_active: bool = Field(True, alias="isActive")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

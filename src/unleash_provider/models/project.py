"""Pydantic models for the project resource and data source."""

from pydantic import BaseModel, Field


class ProjectResourceModel(BaseModel):
    """State of a managed Unleash project."""

    id: str = Field(..., description="Project identifier, chosen by the operator")
    name: str = Field(..., description="Display name of the project")
    description: str | None = Field(None, description="Project description")


class ProjectDataSourceModel(BaseModel):
    """Result of a project lookup by identifier."""

    id: str = Field(..., description="Identifier of the project to look up")
    name: str | None = None
    description: str | None = None

"""Pydantic model for the permission data source."""

from pydantic import BaseModel, Field


class PermissionDataSourceModel(BaseModel):
    """Result of a permission lookup by name and optional environment."""

    name: str = Field(..., description="Permission name, e.g. UPDATE_FEATURE")
    environment: str | None = Field(
        None, description="Environment, for environment-scoped permissions"
    )
    id: int | None = None
    display_name: str | None = None
    type: str | None = None

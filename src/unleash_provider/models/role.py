"""Pydantic models for the role resource and data source."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from unleash_provider.constants import ROLE_TYPES
from unleash_provider.models.common import is_remote


class RolePermission(BaseModel):
    """A permission granted by a role, optionally scoped to an environment."""

    name: str = Field(..., description="Permission name")
    environment: str | None = Field(None, description="Environment name")


class RoleResourceModel(BaseModel):
    """State of a managed custom role."""

    id: str | None = Field(None, description="Server-assigned role identifier")
    name: str = Field(..., description="Role name")
    type: str = Field(..., description="Role type: root-custom or custom")
    description: str | None = Field(None, description="Role description")
    permissions: list[RolePermission] = Field(
        default_factory=list, description="Permissions granted by the role"
    )

    @field_validator("type")
    @classmethod
    def validate_type(cls, v, info: ValidationInfo):
        if v not in ROLE_TYPES and not is_remote(info):
            raise ValueError(f"Role type must be one of {list(ROLE_TYPES)}")
        return v


class RoleDataSourceModel(BaseModel):
    """Result of a role lookup by name."""

    name: str = Field(..., description="Name of the role to look up")
    id: int | None = None
    type: str | None = None
    description: str | None = None

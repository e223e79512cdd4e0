"""Pydantic models for the project access resource."""

from pydantic import BaseModel, Field, field_validator


class RoleAccess(BaseModel):
    """Users and groups that hold a role within a project."""

    role: int = Field(..., description="Identifier of the project role")
    users: set[int] = Field(default_factory=set, description="User identifiers")
    groups: set[int] = Field(default_factory=set, description="Group identifiers")


class ProjectAccessResourceModel(BaseModel):
    """State of the role membership of one project."""

    project: str = Field(..., description="Identifier of the project")
    roles: list[RoleAccess] = Field(
        default_factory=list, description="Role membership, one entry per role"
    )

    @field_validator("roles")
    @classmethod
    def validate_unique_roles(cls, v):
        role_ids = [access.role for access in v]
        if len(role_ids) != len(set(role_ids)):
            raise ValueError("Each role may only appear once")
        return v

    def by_role(self) -> dict[int, RoleAccess]:
        return {access.role: access for access in self.roles}

"""
Pydantic models for Unleash Admin API request and response bodies.

Field names are snake_case in Python and camelCase on the wire. Unknown
response fields are ignored so newer server releases keep validating.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

_API_CONFIG = ConfigDict(populate_by_name=True)


# --- Server metadata ---


class VersionPairRepresentation(BaseModel):
    """OSS and Enterprise version strings."""

    model_config = _API_CONFIG

    oss: str | None = None
    enterprise: str | None = None


class VersionInfoRepresentation(BaseModel):
    """Version information reported by the server."""

    model_config = _API_CONFIG

    current: VersionPairRepresentation = Field(
        default_factory=VersionPairRepresentation
    )
    latest: VersionPairRepresentation = Field(
        default_factory=VersionPairRepresentation
    )
    is_latest: bool = Field(True, alias="isLatest")
    instance_id: str | None = Field(None, alias="instanceId")


class UiConfigRepresentation(BaseModel):
    """Subset of GET /api/admin/ui-config used for the version gate."""

    model_config = _API_CONFIG

    version: str
    version_info: VersionInfoRepresentation = Field(
        default_factory=VersionInfoRepresentation, alias="versionInfo"
    )


# --- Users ---


class UserRepresentation(BaseModel):
    model_config = _API_CONFIG

    id: int
    username: str | None = None
    name: str | None = None
    email: str | None = None
    root_role: int | None = Field(None, alias="rootRole")
    created_at: datetime | None = Field(None, alias="createdAt")


class CreateUserRequest(BaseModel):
    model_config = _API_CONFIG

    username: str | None = None
    name: str | None = None
    email: str | None = None
    password: str | None = None
    root_role: int = Field(..., alias="rootRole")
    send_email: bool = Field(False, alias="sendEmail")


class UpdateUserRequest(BaseModel):
    model_config = _API_CONFIG

    name: str | None = None
    email: str | None = None
    root_role: int | None = Field(None, alias="rootRole")


class PasswordRequest(BaseModel):
    password: str


# --- Projects ---


class ProjectRepresentation(BaseModel):
    model_config = _API_CONFIG

    id: str
    name: str
    description: str | None = None


class ProjectRequest(BaseModel):
    """Body for project creation and update."""

    model_config = _API_CONFIG

    id: str | None = None
    name: str
    description: str | None = None


# --- Permissions and roles ---


class PermissionRepresentation(BaseModel):
    model_config = _API_CONFIG

    id: int | None = None
    name: str
    display_name: str | None = Field(None, alias="displayName")
    type: str | None = None
    environment: str | None = None


class EnvironmentPermissionsRepresentation(BaseModel):
    model_config = _API_CONFIG

    name: str
    permissions: list[PermissionRepresentation] = Field(default_factory=list)


class PermissionGroupsRepresentation(BaseModel):
    model_config = _API_CONFIG

    root: list[PermissionRepresentation] = Field(default_factory=list)
    project: list[PermissionRepresentation] = Field(default_factory=list)
    environments: list[EnvironmentPermissionsRepresentation] = Field(
        default_factory=list
    )


class PermissionsResponse(BaseModel):
    """Body of GET /api/admin/permissions."""

    model_config = _API_CONFIG

    permissions: PermissionGroupsRepresentation = Field(
        default_factory=PermissionGroupsRepresentation
    )


class RolePermissionRepresentation(BaseModel):
    model_config = _API_CONFIG

    id: int | None = None
    name: str
    environment: str | None = None


class RoleRepresentation(BaseModel):
    model_config = _API_CONFIG

    id: int
    name: str
    type: str
    description: str | None = None
    permissions: list[RolePermissionRepresentation] = Field(default_factory=list)


class RoleRequest(BaseModel):
    """Body for role creation and update."""

    model_config = _API_CONFIG

    name: str
    type: str
    description: str | None = None
    permissions: list[RolePermissionRepresentation] = Field(default_factory=list)


class RolesResponse(BaseModel):
    """Body of GET /api/admin/roles."""

    model_config = _API_CONFIG

    roles: list[RoleRepresentation] = Field(default_factory=list)


# --- API tokens ---


class ApiTokenRepresentation(BaseModel):
    model_config = _API_CONFIG

    secret: str
    token_name: str = Field(..., alias="tokenName")
    type: str
    environment: str | None = None
    project: str | None = None
    projects: list[str] = Field(default_factory=list)
    expires_at: datetime | None = Field(None, alias="expiresAt")
    created_at: datetime | None = Field(None, alias="createdAt")


class CreateApiTokenRequest(BaseModel):
    model_config = _API_CONFIG

    token_name: str = Field(..., alias="tokenName")
    type: str
    environment: str | None = None
    projects: list[str] | None = None
    expires_at: datetime | None = Field(None, alias="expiresAt")


class UpdateApiTokenRequest(BaseModel):
    model_config = _API_CONFIG

    expires_at: datetime = Field(..., alias="expiresAt")


class ApiTokensResponse(BaseModel):
    """Body of GET /api/admin/api-tokens."""

    model_config = _API_CONFIG

    tokens: list[ApiTokenRepresentation] = Field(default_factory=list)


# --- Project access ---


class AccessRoleRepresentation(BaseModel):
    model_config = _API_CONFIG

    id: int
    name: str | None = None
    type: str | None = None


class AccessMemberRepresentation(BaseModel):
    """A user or group with access to a project.

    Older servers report a single ``roleId``; newer ones list every role.
    """

    model_config = _API_CONFIG

    id: int
    name: str | None = None
    role_id: int | None = Field(None, alias="roleId")
    roles: list[int] = Field(default_factory=list)

    @property
    def role_ids(self) -> set[int]:
        if self.roles:
            return set(self.roles)
        return {self.role_id} if self.role_id is not None else set()


class ProjectAccessRepresentation(BaseModel):
    """Body of GET /api/admin/projects/{project}/access."""

    model_config = _API_CONFIG

    roles: list[AccessRoleRepresentation] = Field(default_factory=list)
    users: list[AccessMemberRepresentation] = Field(default_factory=list)
    groups: list[AccessMemberRepresentation] = Field(default_factory=list)


class MemberReference(BaseModel):
    id: int


class RoleAccessRequest(BaseModel):
    """Body of PUT /api/admin/projects/{project}/role/{role}/access."""

    users: list[MemberReference] = Field(default_factory=list)
    groups: list[MemberReference] = Field(default_factory=list)

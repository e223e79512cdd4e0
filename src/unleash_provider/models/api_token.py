"""Pydantic model for the API token resource."""

from datetime import datetime

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from unleash_provider.constants import API_TOKEN_TYPES
from unleash_provider.models.common import is_remote


class ApiTokenResourceModel(BaseModel):
    """State of a managed API token. The secret doubles as identifier."""

    secret: str | None = Field(
        None, description="Token secret assigned by the server", repr=False
    )
    token_name: str = Field(..., description="Name of the token")
    type: str = Field(..., description="Token type: client, frontend or admin")
    environment: str | None = Field(
        None, description="Environment the token is bound to"
    )
    projects: list[str] | None = Field(
        None, description="Projects the token can access, * for all"
    )
    expires_at: datetime | None = Field(None, description="Expiry timestamp")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v, info: ValidationInfo):
        if v not in API_TOKEN_TYPES and not is_remote(info):
            raise ValueError(f"Token type must be one of {list(API_TOKEN_TYPES)}")
        return v

    @field_validator("projects")
    @classmethod
    def sort_projects(cls, v):
        # Project order carries no meaning on the server
        return sorted(set(v)) if v is not None else None

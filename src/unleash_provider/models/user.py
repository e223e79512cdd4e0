"""Pydantic models for the user resource and data source."""

from pydantic import BaseModel, Field, model_validator


class UserResourceModel(BaseModel):
    """State of a managed Unleash user."""

    id: str | None = Field(None, description="Server-assigned user identifier")
    username: str | None = Field(None, description="Login name of the user")
    name: str | None = Field(None, description="Display name of the user")
    email: str | None = Field(None, description="Email address of the user")
    password: str | None = Field(None, description="Password of the user", repr=False)
    root_role: int = Field(..., description="Identifier of the user's root role")
    send_email: bool = Field(
        False, description="Send a welcome email to the new user"
    )

    @model_validator(mode="after")
    def require_login(self) -> "UserResourceModel":
        if not self.username and not self.email:
            raise ValueError("Either username or email must be set")
        return self


class UserDataSourceModel(BaseModel):
    """Result of a user lookup by identifier."""

    id: int = Field(..., description="Identifier of the user to look up")
    username: str | None = None
    name: str | None = None
    email: str | None = None
    root_role: int | None = None

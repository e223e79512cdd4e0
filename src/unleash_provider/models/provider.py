"""Pydantic model for the provider configuration block."""

from pydantic import BaseModel, Field


class ProviderConfiguration(BaseModel):
    """
    Provider block as written by the operator.

    Both attributes are optional here; unset values fall back to the
    environment when the provider is configured.
    """

    base_url: str | None = Field(
        None, description="Unleash base URL (everything before /api)"
    )
    authorization: str | None = Field(
        None, description="Authorization token for the Unleash API", repr=False
    )

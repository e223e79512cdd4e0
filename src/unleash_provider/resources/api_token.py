"""
API token resource.

Tokens are identified by their secret, which the server generates. Only the
expiry can be changed after creation; every other attribute forces a new
token.
"""

from ..constants import ALL_PROJECTS, RESOURCE_API_TOKEN
from ..framework import Attribute, AttributeType, Diagnostics, Schema
from ..models.api_token import ApiTokenResourceModel
from ..models.common import REMOTE_CONTEXT
from ..models.unleash_api import (
    ApiTokenRepresentation,
    CreateApiTokenRequest,
    UpdateApiTokenRequest,
)
from .base import UnleashResource


def _to_model(token: ApiTokenRepresentation) -> ApiTokenResourceModel:
    projects = token.projects or ([token.project] if token.project else [ALL_PROJECTS])
    return ApiTokenResourceModel.model_validate(
        {
            "secret": token.secret,
            "token_name": token.token_name,
            "type": token.type.lower(),
            "environment": token.environment,
            "projects": projects,
            "expires_at": token.expires_at,
        },
        context=REMOTE_CONTEXT,
    )


class ApiTokenResource(UnleashResource[ApiTokenResourceModel]):
    """Manages an Unleash API token."""

    type_name = RESOURCE_API_TOKEN
    model = ApiTokenResourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Provides a resource for managing API tokens.",
            attributes={
                "secret": Attribute(
                    AttributeType.STRING,
                    description="The API token secret, also used as identifier.",
                    computed=True,
                    sensitive=True,
                ),
                "token_name": Attribute(
                    AttributeType.STRING,
                    description="The name of the token.",
                    required=True,
                    requires_replace=True,
                ),
                "type": Attribute(
                    AttributeType.STRING,
                    description="The type of the token: client, frontend or admin.",
                    required=True,
                    requires_replace=True,
                ),
                "environment": Attribute(
                    AttributeType.STRING,
                    description="The environment the token has access to.",
                    optional=True,
                    computed=True,
                    requires_replace=True,
                ),
                "projects": Attribute(
                    AttributeType.SET,
                    element_type=AttributeType.STRING,
                    description="The projects the token has access to. "
                    "Use * for all projects.",
                    optional=True,
                    computed=True,
                    requires_replace=True,
                ),
                "expires_at": Attribute(
                    AttributeType.STRING,
                    description="When the token expires, as an RFC 3339 timestamp.",
                    optional=True,
                ),
            },
        )

    def identifier(self, model: ApiTokenResourceModel) -> str | None:
        # The secret itself must never reach the logs
        if model.secret is None:
            return None
        return f"{model.token_name} ({model.type})"

    async def do_create(
        self, plan: ApiTokenResourceModel, diagnostics: Diagnostics
    ) -> ApiTokenResourceModel:
        token = await self.client.create_api_token(
            CreateApiTokenRequest(
                token_name=plan.token_name,
                type=plan.type,
                environment=plan.environment,
                projects=plan.projects,
                expires_at=plan.expires_at,
            )
        )
        created = _to_model(token)
        return plan.model_copy(
            update={
                "secret": created.secret,
                "environment": created.environment,
                "projects": created.projects,
            }
        )

    async def do_read(
        self, state: ApiTokenResourceModel, diagnostics: Diagnostics
    ) -> ApiTokenResourceModel | None:
        tokens = await self.client.get_api_tokens()
        for token in tokens:
            if token.secret == state.secret:
                return _to_model(token)

        self.logger.info(
            f"API token {self.identifier(state)} no longer exists, removing from state"
        )
        return None

    async def do_update(
        self,
        plan: ApiTokenResourceModel,
        state: ApiTokenResourceModel,
        diagnostics: Diagnostics,
    ) -> ApiTokenResourceModel:
        if plan.expires_at != state.expires_at and plan.expires_at is not None:
            await self.client.update_api_token(
                state.secret, UpdateApiTokenRequest(expires_at=plan.expires_at)
            )
            return state.model_copy(update={"expires_at": plan.expires_at})

        if plan.expires_at is None and state.expires_at is not None:
            diagnostics.add_warning(
                "Token expiry cannot be removed",
                "Unleash does not support clearing the expiry of an existing "
                "token; the current expiry is kept.",
            )
        return state

    async def do_delete(
        self, state: ApiTokenResourceModel, diagnostics: Diagnostics
    ) -> None:
        await self.client.delete_api_token(state.secret)

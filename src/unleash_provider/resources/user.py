"""
User resource.

Maps the user lifecycle onto the Unleash users API. Profile attributes and
the password are updated through separate endpoints, so an update may issue
two calls.
"""

from ..constants import RESOURCE_USER
from ..errors import UnleashAPIError
from ..framework import Attribute, AttributeType, Diagnostics, Schema
from ..models.unleash_api import CreateUserRequest, UpdateUserRequest
from ..models.user import UserResourceModel
from .base import UnleashResource

PROFILE_FIELDS = ("name", "email", "root_role")


class UserResource(UnleashResource[UserResourceModel]):
    """Manages an Unleash user."""

    type_name = RESOURCE_USER
    model = UserResourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Provides a resource for managing Unleash users.",
            attributes={
                "id": Attribute(
                    AttributeType.STRING,
                    description="Identifier for this user.",
                    computed=True,
                ),
                "username": Attribute(
                    AttributeType.STRING,
                    description="The username of the user.",
                    optional=True,
                    requires_replace=True,
                ),
                "name": Attribute(
                    AttributeType.STRING,
                    description="The name of the user.",
                    optional=True,
                ),
                "email": Attribute(
                    AttributeType.STRING,
                    description="The email of the user.",
                    optional=True,
                ),
                "password": Attribute(
                    AttributeType.STRING,
                    description="The password of the user.",
                    optional=True,
                    sensitive=True,
                ),
                "root_role": Attribute(
                    AttributeType.INT64,
                    description="The role id for the user.",
                    required=True,
                ),
                "send_email": Attribute(
                    AttributeType.BOOL,
                    description="Send a welcome email to the customer or not. "
                    "Defaults to false.",
                    optional=True,
                    computed=True,
                    default=False,
                    requires_replace=True,
                ),
            },
        )

    def identifier(self, model: UserResourceModel) -> str | None:
        return model.id

    async def do_create(
        self, plan: UserResourceModel, diagnostics: Diagnostics
    ) -> UserResourceModel:
        user = await self.client.create_user(
            CreateUserRequest(
                username=plan.username,
                name=plan.name,
                email=plan.email,
                password=plan.password,
                root_role=plan.root_role,
                send_email=plan.send_email,
            )
        )
        return plan.model_copy(update={"id": str(user.id)})

    async def do_read(
        self, state: UserResourceModel, diagnostics: Diagnostics
    ) -> UserResourceModel | None:
        user = await self.client.get_user(state.id)
        if user is None:
            self.logger.info(f"User {state.id} no longer exists, removing from state")
            return None

        return state.model_copy(
            update={
                "username": user.username,
                "name": user.name,
                "email": user.email,
                "root_role": user.root_role
                if user.root_role is not None
                else state.root_role,
            }
        )

    async def do_update(
        self,
        plan: UserResourceModel,
        state: UserResourceModel,
        diagnostics: Diagnostics,
    ) -> UserResourceModel:
        current = state

        if any(getattr(plan, f) != getattr(state, f) for f in PROFILE_FIELDS):
            try:
                await self.client.update_user(
                    state.id,
                    UpdateUserRequest(
                        name=plan.name, email=plan.email, root_role=plan.root_role
                    ),
                )
            except UnleashAPIError as e:
                diagnostics.append(e.as_diagnostic("Unable to update user"))
                return current
            current = current.model_copy(
                update={f: getattr(plan, f) for f in PROFILE_FIELDS}
            )

        if plan.password and plan.password != state.password:
            try:
                await self.client.change_user_password(state.id, plan.password)
            except UnleashAPIError as e:
                diagnostics.append(e.as_diagnostic("Unable to change user password"))
                return current
            current = current.model_copy(update={"password": plan.password})

        return current

    async def do_delete(
        self, state: UserResourceModel, diagnostics: Diagnostics
    ) -> None:
        await self.client.delete_user(state.id)

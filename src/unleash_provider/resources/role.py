"""Custom role resource."""

from ..constants import RESOURCE_ROLE
from ..framework import Attribute, AttributeType, Diagnostics, Schema
from ..models.common import REMOTE_CONTEXT
from ..models.role import RolePermission, RoleResourceModel
from ..models.unleash_api import (
    RolePermissionRepresentation,
    RoleRepresentation,
    RoleRequest,
)
from .base import UnleashResource


def _to_request(plan: RoleResourceModel) -> RoleRequest:
    return RoleRequest(
        name=plan.name,
        type=plan.type,
        description=plan.description,
        permissions=[
            RolePermissionRepresentation(name=p.name, environment=p.environment)
            for p in plan.permissions
        ],
    )


def _to_model(role: RoleRepresentation) -> RoleResourceModel:
    return RoleResourceModel.model_validate(
        {
            "id": str(role.id),
            "name": role.name,
            "type": role.type,
            "description": role.description or None,
            "permissions": [
                RolePermission(name=p.name, environment=p.environment or None)
                for p in role.permissions
            ],
        },
        context=REMOTE_CONTEXT,
    )


class RoleResource(UnleashResource[RoleResourceModel]):
    """Manages a custom root or project role and its permissions."""

    type_name = RESOURCE_ROLE
    model = RoleResourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Provides a resource for managing custom roles.",
            attributes={
                "id": Attribute(
                    AttributeType.STRING,
                    description="The id of this role.",
                    computed=True,
                ),
                "name": Attribute(
                    AttributeType.STRING,
                    description="The name of this role.",
                    required=True,
                ),
                "type": Attribute(
                    AttributeType.STRING,
                    description="Role type: root-custom or custom (project role).",
                    required=True,
                    requires_replace=True,
                ),
                "description": Attribute(
                    AttributeType.STRING,
                    description="A description of the role's purpose.",
                    optional=True,
                ),
                "permissions": Attribute(
                    AttributeType.LIST,
                    description="Permissions granted by this role.",
                    optional=True,
                    attributes={
                        "name": Attribute(
                            AttributeType.STRING,
                            description="Permission name.",
                            required=True,
                        ),
                        "environment": Attribute(
                            AttributeType.STRING,
                            description="Environment, for environment permissions.",
                            optional=True,
                        ),
                    },
                ),
            },
        )

    def identifier(self, model: RoleResourceModel) -> str | None:
        return model.id

    async def do_create(
        self, plan: RoleResourceModel, diagnostics: Diagnostics
    ) -> RoleResourceModel:
        role = await self.client.create_role(_to_request(plan))
        return plan.model_copy(update={"id": str(role.id)})

    async def do_read(
        self, state: RoleResourceModel, diagnostics: Diagnostics
    ) -> RoleResourceModel | None:
        role = await self.client.get_role(state.id)
        if role is None:
            self.logger.info(f"Role {state.id} no longer exists, removing from state")
            return None
        return _to_model(role)

    async def do_update(
        self,
        plan: RoleResourceModel,
        state: RoleResourceModel,
        diagnostics: Diagnostics,
    ) -> RoleResourceModel:
        planned = plan.model_copy(update={"id": state.id})
        if planned == state:
            return state

        await self.client.update_role(state.id, _to_request(plan))
        return planned

    async def do_delete(
        self, state: RoleResourceModel, diagnostics: Diagnostics
    ) -> None:
        await self.client.delete_role(state.id)

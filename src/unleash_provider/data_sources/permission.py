"""
Permission data source.

Root and project permissions are looked up by name alone; environment
permissions additionally need the environment they apply to.
"""

from ..constants import DATA_SOURCE_PERMISSION
from ..errors import NotFoundError
from ..framework import Attribute, AttributeType, Schema
from ..models.permission import PermissionDataSourceModel
from ..models.unleash_api import PermissionRepresentation, PermissionsResponse
from .base import UnleashDataSource


def _candidates(
    response: PermissionsResponse, environment: str | None
) -> list[PermissionRepresentation]:
    groups = response.permissions
    if environment is None:
        return groups.root + groups.project
    return [
        permission
        for env in groups.environments
        if env.name == environment
        for permission in env.permissions
    ]


class PermissionDataSource(UnleashDataSource[PermissionDataSourceModel]):
    """Looks up a permission by name and optional environment."""

    type_name = DATA_SOURCE_PERMISSION
    model = PermissionDataSourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Fetch a permission.",
            attributes={
                "name": Attribute(
                    AttributeType.STRING,
                    description="The name of the permission.",
                    required=True,
                ),
                "environment": Attribute(
                    AttributeType.STRING,
                    description="The environment of the permission, required "
                    "for environment-specific permissions.",
                    optional=True,
                ),
                "id": Attribute(
                    AttributeType.INT64,
                    description="Identifier for this permission.",
                    computed=True,
                ),
                "display_name": Attribute(
                    AttributeType.STRING,
                    description="Human readable name of the permission.",
                    computed=True,
                ),
                "type": Attribute(
                    AttributeType.STRING,
                    description="Type of the permission: root, project or environment.",
                    computed=True,
                ),
            },
        )

    def lookup_key(self, config: PermissionDataSourceModel) -> str:
        if config.environment:
            return f"{config.name} in {config.environment}"
        return config.name

    async def do_read(
        self, config: PermissionDataSourceModel
    ) -> PermissionDataSourceModel:
        response = await self.client.get_permissions()

        for permission in _candidates(response, config.environment):
            if permission.name == config.name:
                return PermissionDataSourceModel(
                    name=permission.name,
                    environment=config.environment,
                    id=permission.id,
                    display_name=permission.display_name,
                    type=permission.type,
                )

        raise NotFoundError("permission", self.lookup_key(config))

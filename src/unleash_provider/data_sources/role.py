"""Role data source."""

from ..constants import DATA_SOURCE_ROLE
from ..errors import NotFoundError
from ..framework import Attribute, AttributeType, Schema
from ..models.role import RoleDataSourceModel
from .base import UnleashDataSource


class RoleDataSource(UnleashDataSource[RoleDataSourceModel]):
    """Looks up a predefined or custom role by name."""

    type_name = DATA_SOURCE_ROLE
    model = RoleDataSourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Fetch a role.",
            attributes={
                "name": Attribute(
                    AttributeType.STRING,
                    description="The name of the role.",
                    required=True,
                ),
                "id": Attribute(
                    AttributeType.INT64,
                    description="Identifier for this role.",
                    computed=True,
                ),
                "type": Attribute(
                    AttributeType.STRING,
                    description="The type of the role.",
                    computed=True,
                ),
                "description": Attribute(
                    AttributeType.STRING,
                    description="A description of the role's purpose.",
                    computed=True,
                ),
            },
        )

    def lookup_key(self, config: RoleDataSourceModel) -> str:
        return config.name

    async def do_read(self, config: RoleDataSourceModel) -> RoleDataSourceModel:
        roles = await self.client.get_roles()

        for role in roles:
            if role.name == config.name:
                return RoleDataSourceModel(
                    name=role.name,
                    id=role.id,
                    type=role.type,
                    description=role.description or None,
                )

        raise NotFoundError("role", config.name)

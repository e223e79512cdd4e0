"""User data source."""

from ..constants import DATA_SOURCE_USER
from ..errors import NotFoundError
from ..framework import Attribute, AttributeType, Schema
from ..models.user import UserDataSourceModel
from .base import UnleashDataSource


class UserDataSource(UnleashDataSource[UserDataSourceModel]):
    """Looks up a user by numeric identifier."""

    type_name = DATA_SOURCE_USER
    model = UserDataSourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Fetch a user.",
            attributes={
                "id": Attribute(
                    AttributeType.INT64,
                    description="Identifier for this user.",
                    required=True,
                ),
                "username": Attribute(
                    AttributeType.STRING,
                    description="The username of the user.",
                    computed=True,
                ),
                "name": Attribute(
                    AttributeType.STRING,
                    description="The name of the user.",
                    computed=True,
                ),
                "email": Attribute(
                    AttributeType.STRING,
                    description="The email of the user.",
                    computed=True,
                ),
                "root_role": Attribute(
                    AttributeType.INT64,
                    description="The root role id of the user.",
                    computed=True,
                ),
            },
        )

    def lookup_key(self, config: UserDataSourceModel) -> str:
        return str(config.id)

    async def do_read(self, config: UserDataSourceModel) -> UserDataSourceModel:
        user = await self.client.get_user(config.id)
        if user is None:
            raise NotFoundError("user", str(config.id))

        return UserDataSourceModel(
            id=user.id,
            username=user.username,
            name=user.name,
            email=user.email,
            root_role=user.root_role,
        )

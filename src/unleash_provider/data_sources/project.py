"""Project data source."""

from ..constants import DATA_SOURCE_PROJECT
from ..errors import NotFoundError
from ..framework import Attribute, AttributeType, Schema
from ..models.project import ProjectDataSourceModel
from .base import UnleashDataSource


class ProjectDataSource(UnleashDataSource[ProjectDataSourceModel]):
    """Looks up a project by identifier."""

    type_name = DATA_SOURCE_PROJECT
    model = ProjectDataSourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Fetch a project.",
            attributes={
                "id": Attribute(
                    AttributeType.STRING,
                    description="The id of the project.",
                    required=True,
                ),
                "name": Attribute(
                    AttributeType.STRING,
                    description="The name of the project.",
                    computed=True,
                ),
                "description": Attribute(
                    AttributeType.STRING,
                    description="A description of the project's purpose.",
                    computed=True,
                ),
            },
        )

    def lookup_key(self, config: ProjectDataSourceModel) -> str:
        return config.id

    async def do_read(self, config: ProjectDataSourceModel) -> ProjectDataSourceModel:
        project = await self.client.get_project(config.id)
        if project is None:
            raise NotFoundError("project", config.id)

        return ProjectDataSourceModel(
            id=project.id, name=project.name, description=project.description or None
        )

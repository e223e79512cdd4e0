"""Project resource."""

from ..constants import RESOURCE_PROJECT
from ..framework import Attribute, AttributeType, Diagnostics, Schema
from ..models.project import ProjectResourceModel
from ..models.unleash_api import ProjectRequest
from .base import UnleashResource


class ProjectResource(UnleashResource[ProjectResourceModel]):
    """Manages an Unleash project. The identifier is chosen by the operator."""

    type_name = RESOURCE_PROJECT
    model = ProjectResourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Provides a resource for managing Unleash projects.",
            attributes={
                "id": Attribute(
                    AttributeType.STRING,
                    description="The id of this project.",
                    required=True,
                    requires_replace=True,
                ),
                "name": Attribute(
                    AttributeType.STRING,
                    description="The name of this project.",
                    required=True,
                ),
                "description": Attribute(
                    AttributeType.STRING,
                    description="A description of the project's purpose.",
                    optional=True,
                ),
            },
        )

    def identifier(self, model: ProjectResourceModel) -> str | None:
        return model.id

    async def do_create(
        self, plan: ProjectResourceModel, diagnostics: Diagnostics
    ) -> ProjectResourceModel:
        await self.client.create_project(
            ProjectRequest(id=plan.id, name=plan.name, description=plan.description)
        )
        return plan

    async def do_read(
        self, state: ProjectResourceModel, diagnostics: Diagnostics
    ) -> ProjectResourceModel | None:
        project = await self.client.get_project(state.id)
        if project is None:
            self.logger.info(f"Project {state.id} no longer exists, removing from state")
            return None

        return ProjectResourceModel(
            id=project.id,
            name=project.name,
            # Unleash reports a missing description as an empty string
            description=project.description or None,
        )

    async def do_update(
        self,
        plan: ProjectResourceModel,
        state: ProjectResourceModel,
        diagnostics: Diagnostics,
    ) -> ProjectResourceModel:
        if plan == state:
            return state

        await self.client.update_project(
            state.id, ProjectRequest(name=plan.name, description=plan.description)
        )
        return plan

    async def do_delete(
        self, state: ProjectResourceModel, diagnostics: Diagnostics
    ) -> None:
        await self.client.delete_project(state.id)

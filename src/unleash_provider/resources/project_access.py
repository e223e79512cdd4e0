"""
Project access resource.

Manages which users and groups hold each role within a project. Every role
is written with its own call, so create, update and delete may issue several
calls. A failure stops the sequence; calls already applied are kept on the
server and in the returned state.
"""

from ..constants import RESOURCE_PROJECT_ACCESS
from ..errors import UnleashAPIError
from ..framework import Attribute, AttributeType, Diagnostics, Schema
from ..models.project_access import ProjectAccessResourceModel, RoleAccess
from ..models.unleash_api import (
    MemberReference,
    ProjectAccessRepresentation,
    RoleAccessRequest,
)
from .base import UnleashResource


def _to_request(access: RoleAccess) -> RoleAccessRequest:
    return RoleAccessRequest(
        users=[MemberReference(id=user) for user in sorted(access.users)],
        groups=[MemberReference(id=group) for group in sorted(access.groups)],
    )


def _members_by_role(
    access: ProjectAccessRepresentation, role_ids: list[int]
) -> list[RoleAccess]:
    return [
        RoleAccess(
            role=role_id,
            users={u.id for u in access.users if role_id in u.role_ids},
            groups={g.id for g in access.groups if role_id in g.role_ids},
        )
        for role_id in role_ids
    ]


class ProjectAccessResource(UnleashResource[ProjectAccessResourceModel]):
    """Manages role membership of users and groups in one project."""

    type_name = RESOURCE_PROJECT_ACCESS
    model = ProjectAccessResourceModel

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Provides a resource for managing project access.",
            attributes={
                "project": Attribute(
                    AttributeType.STRING,
                    description="The project id.",
                    required=True,
                    requires_replace=True,
                ),
                "roles": Attribute(
                    AttributeType.LIST,
                    description="Roles available in this project, with the users "
                    "and groups holding them.",
                    required=True,
                    attributes={
                        "role": Attribute(
                            AttributeType.INT64,
                            description="Role id.",
                            required=True,
                        ),
                        "users": Attribute(
                            AttributeType.SET,
                            element_type=AttributeType.INT64,
                            description="Users with this role.",
                            optional=True,
                        ),
                        "groups": Attribute(
                            AttributeType.SET,
                            element_type=AttributeType.INT64,
                            description="Groups with this role.",
                            optional=True,
                        ),
                    },
                ),
            },
        )

    def identifier(self, model: ProjectAccessResourceModel) -> str | None:
        return model.project

    async def do_create(
        self, plan: ProjectAccessResourceModel, diagnostics: Diagnostics
    ) -> ProjectAccessResourceModel:
        for access in plan.roles:
            await self.client.set_role_access(
                plan.project, access.role, _to_request(access)
            )
        return plan

    async def do_read(
        self, state: ProjectAccessResourceModel, diagnostics: Diagnostics
    ) -> ProjectAccessResourceModel | None:
        access = await self.client.get_project_access(state.project)
        if access is None:
            self.logger.info(
                f"Project {state.project} no longer exists, removing access from state"
            )
            return None

        # Only roles tracked in state are refreshed; other roles are unmanaged
        role_ids = [r.role for r in state.roles]
        return ProjectAccessResourceModel(
            project=state.project, roles=_members_by_role(access, role_ids)
        )

    async def do_update(
        self,
        plan: ProjectAccessResourceModel,
        state: ProjectAccessResourceModel,
        diagnostics: Diagnostics,
    ) -> ProjectAccessResourceModel:
        applied = state.by_role()
        planned = plan.by_role()

        changes = [
            access for role, access in planned.items() if applied.get(role) != access
        ]
        # Roles dropped from the plan lose all their members
        changes += [RoleAccess(role=role) for role in applied if role not in planned]

        for access in changes:
            try:
                await self.client.set_role_access(
                    state.project, access.role, _to_request(access)
                )
            except UnleashAPIError as e:
                diagnostics.append(
                    e.as_diagnostic(f"Unable to update access for role {access.role}")
                )
                break

            if access.role in planned:
                applied[access.role] = access
            else:
                del applied[access.role]

        ordered = [applied[r] for r in planned if r in applied]
        ordered += [a for r, a in applied.items() if r not in planned]
        return ProjectAccessResourceModel(project=state.project, roles=ordered)

    async def do_delete(
        self, state: ProjectAccessResourceModel, diagnostics: Diagnostics
    ) -> None:
        for access in state.roles:
            try:
                await self.client.set_role_access(
                    state.project, access.role, _to_request(RoleAccess(role=access.role))
                )
            except UnleashAPIError as e:
                if e.is_not_found:
                    self.logger.info(
                        f"Project {state.project} already deleted, nothing to revoke"
                    )
                    return
                raise

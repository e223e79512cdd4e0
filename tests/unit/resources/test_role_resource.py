"""Unit tests for the custom role resource."""

import pytest

from tests.helpers import api_error
from unleash_provider.models.role import RolePermission, RoleResourceModel
from unleash_provider.models.unleash_api import (
    RolePermissionRepresentation,
    RoleRepresentation,
)
from unleash_provider.resources import RoleResource


@pytest.fixture
def resource(provider_data) -> RoleResource:
    return RoleResource(provider_data)


@pytest.fixture
def state() -> RoleResourceModel:
    return RoleResourceModel(
        id="8",
        name="Releaser",
        type="custom",
        permissions=[
            RolePermission(name="UPDATE_FEATURE_ENVIRONMENT", environment="prod")
        ],
    )


class TestRoleResource:
    @pytest.mark.asyncio
    async def test_create(self, resource, mock_client):
        mock_client.create_role.return_value = RoleRepresentation(
            id=8, name="Releaser", type="custom"
        )

        result = await resource.create(
            {
                "name": "Releaser",
                "type": "custom",
                "permissions": [
                    {"name": "UPDATE_FEATURE_ENVIRONMENT", "environment": "prod"}
                ],
            }
        )

        assert result.state.id == "8"
        request = mock_client.create_role.await_args.args[0]
        assert request.permissions[0].environment == "prod"

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_type(self, resource, mock_client):
        result = await resource.create({"name": "Releaser", "type": "root"})

        assert result.state is None
        assert result.has_error
        mock_client.create_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_read(self, resource, mock_client, state):
        mock_client.get_role.return_value = RoleRepresentation(
            id=8,
            name="Releaser",
            type="custom",
            description="",
            permissions=[
                RolePermissionRepresentation(
                    id=40, name="UPDATE_FEATURE_ENVIRONMENT", environment="prod"
                ),
                RolePermissionRepresentation(id=41, name="CREATE_FEATURE"),
            ],
        )

        result = await resource.read(state)

        assert result.state.description is None
        assert [p.name for p in result.state.permissions] == [
            "UPDATE_FEATURE_ENVIRONMENT",
            "CREATE_FEATURE",
        ]
        assert result.state.permissions[1].environment is None

    @pytest.mark.asyncio
    async def test_read_missing_role(self, resource, mock_client, state):
        mock_client.get_role.return_value = None

        result = await resource.read(state)

        assert result.state is None

    @pytest.mark.asyncio
    async def test_update_keeps_id(self, resource, mock_client, state):
        plan = state.model_copy(update={"id": None, "description": "Ships releases"})

        result = await resource.update(plan, state)

        assert result.state.id == "8"
        assert result.state.description == "Ships releases"
        role_id, request = mock_client.update_role.await_args.args
        assert role_id == "8"
        assert request.name == "Releaser"

    @pytest.mark.asyncio
    async def test_update_without_changes_is_noop(self, resource, mock_client, state):
        plan = state.model_copy(update={"id": None})

        result = await resource.update(plan, state)

        assert result.state == state
        assert not result.diagnostics
        mock_client.update_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_type_change_requires_replacement(self, resource, mock_client, state):
        plan = state.model_copy(update={"type": "root-custom"})

        result = await resource.update(plan, state)

        assert result.has_error
        mock_client.update_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_role_in_use(self, resource, mock_client, state):
        mock_client.delete_role.side_effect = api_error(400, "Role is in use")

        result = await resource.delete(state)

        assert result.state == state
        assert result.diagnostics.errors[0].summary == "Unable to delete unleash_role"

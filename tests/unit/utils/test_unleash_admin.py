"""Unit tests for UnleashAdminClient request handling."""

import logging

import httpx
import pytest

from tests.helpers import RecordingTransport, ui_config
from unleash_provider.errors import UnleashAPIError
from unleash_provider.models.unleash_api import (
    CreateApiTokenRequest,
    CreateUserRequest,
    MemberReference,
    RoleAccessRequest,
)
from unleash_provider.utils.unleash_admin import (
    UnleashAdminClient,
    create_unleash_client,
)

BASE_URL = "https://unleash.example.com"


def make_client(transport: RecordingTransport, **kwargs) -> UnleashAdminClient:
    return UnleashAdminClient(
        f"{BASE_URL}/", "token-x", transport=transport, **kwargs
    )


class TestClientConstruction:
    """Tests for base URL handling and default headers."""

    @pytest.mark.asyncio
    async def test_trailing_slash_is_stripped(self):
        """Should not produce a double slash when joining paths."""
        transport = RecordingTransport(
            {("GET", "/api/admin/ui-config"): httpx.Response(200, json=ui_config())}
        )
        async with make_client(transport) as client:
            assert client.base_url == BASE_URL
            await client.get_ui_config()

        assert str(transport.requests[0].url) == f"{BASE_URL}/api/admin/ui-config"

    @pytest.mark.asyncio
    async def test_authorization_header_is_sent_verbatim(self):
        """Should send the configured token unchanged on every request."""
        transport = RecordingTransport(
            {("GET", "/api/admin/ui-config"): httpx.Response(200, json=ui_config())}
        )
        async with make_client(transport) as client:
            await client.get_ui_config()

        assert transport.requests[0].headers["Authorization"] == "token-x"

    @pytest.mark.asyncio
    async def test_close_marks_client_closed(self):
        """Should report closed after close."""
        client = make_client(RecordingTransport())
        assert not client.is_closed
        await client.close()
        assert client.is_closed

    @pytest.mark.asyncio
    async def test_factory_passes_options(self):
        """Should build a client with the given options."""
        client = create_unleash_client(
            f"{BASE_URL}//", "token-x", debug=True, timeout=5, verify_ssl=False
        )
        try:
            assert client.base_url == BASE_URL
            assert client.debug is True
            assert client.timeout == 5
            assert client.verify_ssl is False
        finally:
            await client.close()


class TestErrorHandling:
    """Tests for HTTP failure conversion."""

    @pytest.mark.asyncio
    async def test_lookup_returns_none_on_404(self):
        """Should treat a missing entity as absence, not failure."""
        async with make_client(RecordingTransport()) as client:
            assert await client.get_user(42) is None
            assert await client.get_project("missing") is None
            assert await client.get_role(7) is None

    @pytest.mark.asyncio
    async def test_delete_returns_false_on_404(self):
        """Should report an already deleted entity without raising."""
        async with make_client(RecordingTransport()) as client:
            assert await client.delete_user(42) is False

    @pytest.mark.asyncio
    async def test_delete_returns_true_on_success(self):
        transport = RecordingTransport(
            {("DELETE", "/api/admin/users/42"): httpx.Response(200)}
        )
        async with make_client(transport) as client:
            assert await client.delete_user(42) is True

    @pytest.mark.asyncio
    async def test_server_error_raises_with_status_and_body(self):
        """Should raise UnleashAPIError carrying status and body."""
        transport = RecordingTransport(
            {("GET", "/api/admin/users/1"): httpx.Response(500, text="boom")}
        )
        async with make_client(transport) as client:
            with pytest.raises(UnleashAPIError) as exc_info:
                await client.get_user(1)

        assert exc_info.value.status_code == 500
        assert exc_info.value.response_body == "boom"
        assert "HTTP 500" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error_raises_without_status(self):
        """Should wrap connection failures in UnleashAPIError."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = UnleashAdminClient(
            BASE_URL, "token-x", transport=httpx.MockTransport(refuse)
        )
        async with client:
            with pytest.raises(UnleashAPIError) as exc_info:
                await client.get_ui_config()

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_unexpected_body_raises(self):
        """Should reject a response body that does not match the model."""
        transport = RecordingTransport(
            {("GET", "/api/admin/users/1"): httpx.Response(200, json={"name": "x"})}
        )
        async with make_client(transport) as client:
            with pytest.raises(UnleashAPIError, match="Unexpected response body"):
                await client.get_user(1)


class TestRequestBodies:
    """Tests for request serialization."""

    @pytest.mark.asyncio
    async def test_create_user_sends_camel_case_without_nulls(self):
        transport = RecordingTransport(
            {
                ("POST", "/api/admin/users"): httpx.Response(
                    201, json={"id": 9, "username": "jane", "rootRole": 3}
                )
            }
        )
        async with make_client(transport) as client:
            user = await client.create_user(
                CreateUserRequest(username="jane", root_role=3)
            )

        assert user.id == 9
        assert transport.json_body() == {
            "username": "jane",
            "rootRole": 3,
            "sendEmail": False,
        }

    @pytest.mark.asyncio
    async def test_create_api_token_sends_token_name(self):
        transport = RecordingTransport(
            {
                ("POST", "/api/admin/api-tokens"): httpx.Response(
                    201,
                    json={
                        "secret": "default:development.abc",
                        "tokenName": "ci",
                        "type": "client",
                        "environment": "development",
                        "projects": ["default"],
                    },
                )
            }
        )
        async with make_client(transport) as client:
            token = await client.create_api_token(
                CreateApiTokenRequest(
                    token_name="ci",
                    type="client",
                    environment="development",
                    projects=["default"],
                )
            )

        assert token.secret == "default:development.abc"
        assert transport.json_body()["tokenName"] == "ci"

    @pytest.mark.asyncio
    async def test_set_role_access_path_and_body(self):
        transport = RecordingTransport(
            {
                ("PUT", "/api/admin/projects/my project/role/4/access"): (
                    httpx.Response(200)
                )
            }
        )
        async with make_client(transport) as client:
            await client.set_role_access(
                "my project",
                4,
                RoleAccessRequest(users=[MemberReference(id=1)], groups=[]),
            )

        assert transport.json_body() == {"users": [{"id": 1}], "groups": []}

    @pytest.mark.asyncio
    async def test_get_roles_unwraps_list(self):
        transport = RecordingTransport(
            {
                ("GET", "/api/admin/roles"): httpx.Response(
                    200,
                    json={
                        "roles": [
                            {"id": 1, "name": "Admin", "type": "root"},
                            {"id": 4, "name": "Owner", "type": "project"},
                        ]
                    },
                )
            }
        )
        async with make_client(transport) as client:
            roles = await client.get_roles()

        assert [r.name for r in roles] == ["Admin", "Owner"]


class TestTracing:
    """Tests for request/response tracing in debug mode."""

    @pytest.mark.asyncio
    async def test_debug_logs_requests_and_responses(self, caplog):
        transport = RecordingTransport(
            {("GET", "/api/admin/ui-config"): httpx.Response(200, json=ui_config())}
        )
        logger_name = "unleash_provider.utils.unleash_admin"
        with caplog.at_level(logging.DEBUG, logger=logger_name):
            async with make_client(transport, debug=True) as client:
                await client.get_ui_config()

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Unleash API request: GET") for m in messages)
        assert any(m.startswith("Unleash API response: 200") for m in messages)

    @pytest.mark.asyncio
    async def test_no_tracing_without_debug(self, caplog):
        transport = RecordingTransport(
            {("GET", "/api/admin/ui-config"): httpx.Response(200, json=ui_config())}
        )
        logger_name = "unleash_provider.utils.unleash_admin"
        with caplog.at_level(logging.DEBUG, logger=logger_name):
            async with make_client(transport) as client:
                await client.get_ui_config()

        assert not any(
            r.getMessage().startswith("Unleash API") for r in caplog.records
        )

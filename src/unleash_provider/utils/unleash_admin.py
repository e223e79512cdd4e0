"""
Unleash Admin API client utilities.

This module provides a typed interface to the Unleash Admin REST API for
managing users, projects, roles, API tokens and project access.

The client handles:
- Base URL normalization and the static Authorization header
- Optional request/response tracing when verbose logging is enabled
- Conversion of HTTP failures into UnleashAPIError
- Type-safe request and response bodies via Pydantic models

One client is created per provider configuration and shared by every
resource and data source. It is never mutated after construction.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from unleash_provider.constants import (
    API_TOKENS_PATH,
    BODY_PREVIEW_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    PERMISSIONS_PATH,
    PROJECTS_PATH,
    ROLES_PATH,
    UI_CONFIG_PATH,
    USERS_PATH,
)
from unleash_provider.errors import UnleashAPIError
from unleash_provider.models.unleash_api import (
    ApiTokenRepresentation,
    ApiTokensResponse,
    CreateApiTokenRequest,
    CreateUserRequest,
    PasswordRequest,
    PermissionsResponse,
    ProjectAccessRepresentation,
    ProjectRepresentation,
    ProjectRequest,
    RoleAccessRequest,
    RoleRepresentation,
    RoleRequest,
    RolesResponse,
    UiConfigRepresentation,
    UpdateApiTokenRequest,
    UpdateUserRequest,
    UserRepresentation,
)

logger = logging.getLogger(__name__)


def _preview(body: bytes | str | None, limit: int = BODY_PREVIEW_LIMIT) -> str:
    if not body:
        return "<no content>"
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...<truncated>"


class UnleashAdminClient:
    """
    High-level client for Unleash Admin API operations.

    Lookup methods return None when the entity does not exist. Delete
    methods return False when the entity was already gone. Every other
    failure raises UnleashAPIError.
    """

    def __init__(
        self,
        base_url: str,
        authorization: str,
        debug: bool = False,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Unleash Admin client.

        Args:
            base_url: Base URL of the Unleash server (trailing slashes are stripped)
            authorization: API token sent as the Authorization header
            debug: Log request and response bodies at DEBUG level
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            transport: Optional httpx transport, used to stub the server in tests
        """
        self.base_url = base_url.rstrip("/")
        self.debug = debug
        self.timeout = timeout
        self.verify_ssl = verify_ssl

        event_hooks: dict[str, list[Any]] = {}
        if debug:
            event_hooks = {
                "request": [self._log_request],
                "response": [self._log_response],
            }

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": authorization,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(timeout),
            verify=verify_ssl,
            event_hooks=event_hooks,
            transport=transport,
            follow_redirects=False,
        )

        logger.info(f"Initialized Unleash Admin client for {self.base_url}")

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "UnleashAdminClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # Tracing hooks (only installed when debug is enabled)

    async def _log_request(self, request: httpx.Request) -> None:
        logger.debug(
            f"Unleash API request: {request.method} {request.url}",
            extra={
                "http_method": request.method,
                "http_url": str(request.url),
                "request_body": _preview(request.content),
            },
        )

    async def _log_response(self, response: httpx.Response) -> None:
        await response.aread()
        logger.debug(
            f"Unleash API response: {response.status_code} for "
            f"{response.request.method} {response.request.url}",
            extra={
                "http_method": response.request.method,
                "http_url": str(response.request.url),
                "http_status": response.status_code,
                "response_body": _preview(response.content),
            },
        )

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Make a request to the Unleash Admin API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API path relative to the base URL
            json: JSON request body
            params: Query parameters

        Returns:
            Response object with body already buffered

        Raises:
            UnleashAPIError: On non-2xx responses and transport failures
        """
        try:
            response = await self._client.request(
                method=method,
                url=endpoint.lstrip("/"),
                json=json,
                params=params,
            )
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            response_body = e.response.text or "<no content>"

            # Missing entities are expected during refresh and idempotent deletes
            log = logger.debug if status_code == 404 else logger.error
            log(
                f"Request failed: {method} {endpoint} - HTTP {status_code}",
                extra={
                    "http_method": method,
                    "http_status": status_code,
                    "response_body": _preview(response_body),
                },
            )
            raise UnleashAPIError(
                f"{method} {endpoint} failed",
                status_code=status_code,
                response_body=response_body,
                cause=e,
            ) from e

        except httpx.HTTPError as e:
            # Connection errors, timeouts, invalid URLs
            logger.error(f"Request failed: {method} {endpoint} - {e}")
            raise UnleashAPIError(
                f"{method} {endpoint} failed: {e}", status_code=None, cause=e
            ) from e

    async def _make_validated_request(
        self,
        method: str,
        endpoint: str,
        request_model: BaseModel | None = None,
        response_model: type[BaseModel] | None = None,
        **kwargs: Any,
    ) -> Any:
        """
        Make a request with Pydantic serialization and validation.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API path relative to the base URL
            request_model: Pydantic model instance to serialize as request body
            response_model: Pydantic model class to validate response data
            **kwargs: Additional arguments passed to _make_request

        Returns:
            Validated response model instance if response_model is provided,
            otherwise the raw Response object

        Raises:
            UnleashAPIError: If the request fails or the response body does
                not match the expected model
        """
        if request_model is not None:
            # exclude_none: don't send null values; by_alias: camelCase names
            kwargs["json"] = request_model.model_dump(
                mode="json", exclude_none=True, by_alias=True
            )

        response = await self._make_request(method, endpoint, **kwargs)

        if response_model is None:
            return response

        try:
            return response_model.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise UnleashAPIError(
                f"Unexpected response body from {method} {endpoint}: {e}",
                status_code=response.status_code,
                response_body=response.text,
                cause=e,
            ) from e

    async def _get_optional(
        self, endpoint: str, response_model: type[BaseModel]
    ) -> Any:
        try:
            return await self._make_validated_request(
                "GET", endpoint, response_model=response_model
            )
        except UnleashAPIError as e:
            if e.is_not_found:
                return None
            raise

    async def _delete(self, endpoint: str) -> bool:
        try:
            await self._make_request("DELETE", endpoint)
            return True
        except UnleashAPIError as e:
            if e.is_not_found:
                logger.info(f"{endpoint} already deleted")
                return False
            raise

    # Server metadata

    async def get_ui_config(self) -> UiConfigRepresentation:
        """Get server metadata, including version information."""
        return await self._make_validated_request(
            "GET", UI_CONFIG_PATH, response_model=UiConfigRepresentation
        )

    # User Management Methods

    async def get_user(self, user_id: int | str) -> UserRepresentation | None:
        return await self._get_optional(f"{USERS_PATH}/{user_id}", UserRepresentation)

    async def create_user(self, user: CreateUserRequest) -> UserRepresentation:
        logger.info(f"Creating user: {user.username or user.email}")
        return await self._make_validated_request(
            "POST", USERS_PATH, request_model=user, response_model=UserRepresentation
        )

    async def update_user(
        self, user_id: int | str, user: UpdateUserRequest
    ) -> UserRepresentation:
        logger.info(f"Updating user: {user_id}")
        return await self._make_validated_request(
            "PUT",
            f"{USERS_PATH}/{user_id}",
            request_model=user,
            response_model=UserRepresentation,
        )

    async def change_user_password(self, user_id: int | str, password: str) -> None:
        logger.info(f"Changing password of user: {user_id}")
        await self._make_validated_request(
            "POST",
            f"{USERS_PATH}/{user_id}/change-password",
            request_model=PasswordRequest(password=password),
        )

    async def delete_user(self, user_id: int | str) -> bool:
        logger.info(f"Deleting user: {user_id}")
        return await self._delete(f"{USERS_PATH}/{user_id}")

    # Project Management Methods

    async def get_project(self, project_id: str) -> ProjectRepresentation | None:
        return await self._get_optional(
            f"{PROJECTS_PATH}/{quote(project_id, safe='')}", ProjectRepresentation
        )

    async def create_project(self, project: ProjectRequest) -> ProjectRepresentation:
        logger.info(f"Creating project: {project.id}")
        return await self._make_validated_request(
            "POST",
            PROJECTS_PATH,
            request_model=project,
            response_model=ProjectRepresentation,
        )

    async def update_project(self, project_id: str, project: ProjectRequest) -> None:
        logger.info(f"Updating project: {project_id}")
        await self._make_validated_request(
            "PUT",
            f"{PROJECTS_PATH}/{quote(project_id, safe='')}",
            request_model=project,
        )

    async def delete_project(self, project_id: str) -> bool:
        logger.info(f"Deleting project: {project_id}")
        return await self._delete(f"{PROJECTS_PATH}/{quote(project_id, safe='')}")

    # Role and Permission Methods

    async def get_permissions(self) -> PermissionsResponse:
        return await self._make_validated_request(
            "GET", PERMISSIONS_PATH, response_model=PermissionsResponse
        )

    async def get_roles(self) -> list[RoleRepresentation]:
        response = await self._make_validated_request(
            "GET", ROLES_PATH, response_model=RolesResponse
        )
        return response.roles

    async def get_role(self, role_id: int | str) -> RoleRepresentation | None:
        return await self._get_optional(f"{ROLES_PATH}/{role_id}", RoleRepresentation)

    async def create_role(self, role: RoleRequest) -> RoleRepresentation:
        logger.info(f"Creating role: {role.name}")
        return await self._make_validated_request(
            "POST", ROLES_PATH, request_model=role, response_model=RoleRepresentation
        )

    async def update_role(
        self, role_id: int | str, role: RoleRequest
    ) -> RoleRepresentation:
        logger.info(f"Updating role: {role_id}")
        return await self._make_validated_request(
            "PUT",
            f"{ROLES_PATH}/{role_id}",
            request_model=role,
            response_model=RoleRepresentation,
        )

    async def delete_role(self, role_id: int | str) -> bool:
        logger.info(f"Deleting role: {role_id}")
        return await self._delete(f"{ROLES_PATH}/{role_id}")

    # API Token Methods

    async def get_api_tokens(self) -> list[ApiTokenRepresentation]:
        response = await self._make_validated_request(
            "GET", API_TOKENS_PATH, response_model=ApiTokensResponse
        )
        return response.tokens

    async def create_api_token(
        self, token: CreateApiTokenRequest
    ) -> ApiTokenRepresentation:
        logger.info(f"Creating API token: {token.token_name}")
        return await self._make_validated_request(
            "POST",
            API_TOKENS_PATH,
            request_model=token,
            response_model=ApiTokenRepresentation,
        )

    async def update_api_token(
        self, secret: str, token: UpdateApiTokenRequest
    ) -> None:
        await self._make_validated_request(
            "PUT", f"{API_TOKENS_PATH}/{quote(secret, safe='')}", request_model=token
        )

    async def delete_api_token(self, secret: str) -> bool:
        return await self._delete(f"{API_TOKENS_PATH}/{quote(secret, safe='')}")

    # Project Access Methods

    async def get_project_access(
        self, project_id: str
    ) -> ProjectAccessRepresentation | None:
        return await self._get_optional(
            f"{PROJECTS_PATH}/{quote(project_id, safe='')}/access",
            ProjectAccessRepresentation,
        )

    async def set_role_access(
        self, project_id: str, role_id: int, access: RoleAccessRequest
    ) -> None:
        """Replace the users and groups holding a role within a project."""
        logger.info(f"Setting access for role {role_id} in project {project_id}")
        await self._make_validated_request(
            "PUT",
            f"{PROJECTS_PATH}/{quote(project_id, safe='')}/role/{role_id}/access",
            request_model=access,
        )


def create_unleash_client(
    base_url: str,
    authorization: str,
    debug: bool = False,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    verify_ssl: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> UnleashAdminClient:
    """
    Factory function to create the shared UnleashAdminClient.

    Args:
        base_url: Validated base URL of the Unleash server
        authorization: Validated API token
        debug: Trace request and response bodies
        timeout: Request timeout in seconds
        verify_ssl: Whether to verify TLS certificates
        transport: Optional httpx transport override

    Returns:
        Configured UnleashAdminClient instance
    """
    logger.info(f"Base URL: {base_url.rstrip('/')}")
    return UnleashAdminClient(
        base_url=base_url,
        authorization=authorization,
        debug=debug,
        timeout=timeout,
        verify_ssl=verify_ssl,
        transport=transport,
    )

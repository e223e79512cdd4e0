"""
Unleash provider - entry point used by the host.

The host instantiates the provider, calls ``configure`` once per session and
then creates resources and data sources bound to the resulting
ProviderData. The provider owns the shared Unleash Admin client; resources
and data sources only borrow it.

Environment Variables:
    UNLEASH_URL: Base URL used when base_url is not configured
    AUTH_TOKEN: API token used when authorization is not configured
    TF_LOG: debug or trace enables HTTP request/response tracing
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from unleash_provider import __version__
from unleash_provider.compatibility import version_check
from unleash_provider.constants import PROVIDER_TYPE_NAME
from unleash_provider.data_sources import (
    PermissionDataSource,
    ProjectDataSource,
    RoleDataSource,
    UnleashDataSource,
    UserDataSource,
)
from unleash_provider.errors import ConfigurationError
from unleash_provider.framework import (
    Attribute,
    AttributeType,
    Diagnostics,
    ProviderData,
    Schema,
)
from unleash_provider.models.provider import ProviderConfiguration
from unleash_provider.observability.logging import setup_structured_logging
from unleash_provider.resources import (
    ApiTokenResource,
    ProjectAccessResource,
    ProjectResource,
    RoleResource,
    UnleashResource,
    UserResource,
)
from unleash_provider.settings import Settings
from unleash_provider.utils.unleash_admin import (
    UnleashAdminClient,
    create_unleash_client,
)

logger = logging.getLogger(__name__)

PROVIDER_DESCRIPTION = """Interface with [Unleash server API](https://docs.getunleash.io/reference/api/unleash). \
This provider implements a subset of the operations that can be done with Unleash. \
The focus is mostly in setting up the instance with projects, roles, permissions, \
groups, and other typical configuration usually performed by admins."""


@dataclass(frozen=True)
class ProviderMetadata:
    type_name: str
    version: str


@dataclass
class ConfigureResult:
    """Outcome of provider configuration; provider_data is None on error."""

    provider_data: ProviderData | None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


def config_value(value: str | None, env_value: str | None) -> str:
    """
    Resolve a provider attribute against its environment fallback.

    Args:
        value: Value from the provider block, None when not set
        env_value: Value of the fallback environment variable

    Returns:
        The configured value, else the environment value, else ""
    """
    if value is None:
        return env_value or ""
    return value


def must_have(name: str, value: str, diagnostics: Diagnostics) -> None:
    """Record an error when a required provider attribute resolved to empty."""
    if value == "":
        diagnostics.add_error(
            f"Unable to find {name}", f"{name} cannot be an empty string"
        )


def configure_logging(settings: Settings) -> None:
    """Configure structured logging for the provider process."""
    setup_structured_logging(
        log_level="DEBUG" if settings.is_debug else settings.log_level.upper(),
        enable_json_formatting=settings.json_logs,
        correlation_id_enabled=settings.correlation_ids,
    )


class UnleashProvider:
    """
    The Unleash provider.

    Provides:
    - Provider schema and metadata
    - Configuration into a shared Unleash Admin client, gated on server version
    - Explicit registries of resource and data source types
    """

    RESOURCES: tuple[type[UnleashResource], ...] = (
        UserResource,
        ProjectResource,
        ApiTokenResource,
        RoleResource,
        ProjectAccessResource,
    )

    DATA_SOURCES: tuple[type[UnleashDataSource], ...] = (
        UserDataSource,
        ProjectDataSource,
        PermissionDataSource,
        RoleDataSource,
    )

    def __init__(
        self,
        version: str = "dev",
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize provider.

        Args:
            version: Provider version; "dev" for local builds, "test" in tests
            settings: Environment settings, read at configure time if omitted
            transport: Optional httpx transport for the shared client
        """
        self.version = version
        self._settings = settings
        self._transport = transport
        self.provider_data: ProviderData | None = None

    def metadata(self) -> ProviderMetadata:
        return ProviderMetadata(type_name=PROVIDER_TYPE_NAME, version=self.version)

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description=PROVIDER_DESCRIPTION,
            attributes={
                "base_url": Attribute(
                    AttributeType.STRING,
                    description="Unleash base URL (everything before `/api`)",
                    optional=True,
                ),
                "authorization": Attribute(
                    AttributeType.STRING,
                    description="Authorization token for Unleash API",
                    optional=True,
                    sensitive=True,
                ),
            },
        )

    async def configure(
        self, config: ProviderConfiguration | dict[str, Any] | None = None
    ) -> ConfigureResult:
        """
        Configure the shared Unleash Admin client.

        Resolves base_url and authorization (explicit values first, then the
        environment), builds the client, and checks the server version. Any
        error leaves the provider unconfigured.

        Args:
            config: Provider block, as a model or a raw attribute map

        Returns:
            ConfigureResult with ProviderData on success and all diagnostics
        """
        diagnostics = Diagnostics()

        if config is None:
            config = ProviderConfiguration()
        elif isinstance(config, dict):
            diagnostics.extend(self.schema().validate(config))
            if diagnostics.has_error:
                return ConfigureResult(None, diagnostics)
            try:
                config = ProviderConfiguration.model_validate(config)
            except PydanticValidationError as e:
                diagnostics.add_error("Invalid provider configuration", str(e))
                return ConfigureResult(None, diagnostics)

        await self.close()

        try:
            settings = self._settings or Settings()
        except PydanticValidationError as e:
            diagnostics.add_error("Invalid provider environment", str(e))
            return ConfigureResult(None, diagnostics)

        client = self._build_client(config, settings, diagnostics)
        if client is None:
            logger.error("Unable to prepare client")
            return ConfigureResult(None, diagnostics)

        await version_check(client, diagnostics)
        if diagnostics.has_error:
            await client.close()
            return ConfigureResult(None, diagnostics)

        self.provider_data = ProviderData(client=client)
        logger.info("Configured Unleash client", extra={"operation": "configure"})
        return ConfigureResult(self.provider_data, diagnostics)

    def _build_client(
        self,
        config: ProviderConfiguration,
        settings: Settings,
        diagnostics: Diagnostics,
    ) -> UnleashAdminClient | None:
        base_url = config_value(config.base_url, settings.unleash_url).rstrip("/")
        authorization = config_value(config.authorization, settings.auth_token)
        must_have("base_url", base_url, diagnostics)
        must_have("authorization", authorization, diagnostics)

        if diagnostics.has_error:
            return None

        logger.debug(
            "Configuring Unleash client",
            extra={"provider_config": self.schema().redact(config.model_dump())},
        )
        return create_unleash_client(
            base_url,
            authorization,
            debug=settings.is_debug,
            timeout=settings.request_timeout,
            verify_ssl=settings.verify_ssl,
            transport=self._transport,
        )

    def resources(self) -> list[type[UnleashResource]]:
        return list(self.RESOURCES)

    def data_sources(self) -> list[type[UnleashDataSource]]:
        return list(self.DATA_SOURCES)

    def _require_data(self) -> ProviderData:
        if self.provider_data is None:
            raise ConfigurationError(
                "Provider is not configured",
                user_action="Call configure before creating resources or data sources",
            )
        return self.provider_data

    def new_resource(self, type_name: str) -> UnleashResource:
        """
        Create a resource bound to the configured provider data.

        Raises:
            ConfigurationError: If the provider is not configured
            KeyError: If no resource with that type name is registered
        """
        for resource_type in self.RESOURCES:
            if resource_type.type_name == type_name:
                return resource_type(self._require_data())
        raise KeyError(f"Unknown resource type: {type_name}")

    def new_data_source(self, type_name: str) -> UnleashDataSource:
        """
        Create a data source bound to the configured provider data.

        Raises:
            ConfigurationError: If the provider is not configured
            KeyError: If no data source with that type name is registered
        """
        for data_source_type in self.DATA_SOURCES:
            if data_source_type.type_name == type_name:
                return data_source_type(self._require_data())
        raise KeyError(f"Unknown data source type: {type_name}")

    async def close(self) -> None:
        """Release the shared client, if any."""
        if self.provider_data is not None:
            await self.provider_data.client.close()
            self.provider_data = None

    async def __aenter__(self) -> "UnleashProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def new(version: str = __version__) -> Callable[[], UnleashProvider]:
    """
    Return a constructor for the provider, as expected by the host.

    Logging is configured from the environment once, when the constructor
    is created.
    """
    configure_logging(Settings())

    def factory() -> UnleashProvider:
        return UnleashProvider(version=version)

    return factory

"""Centralized provider settings using pydantic-settings.

This module provides a single source of truth for all provider configuration
loaded from environment variables. Explicit provider attributes always win;
these values are the fallbacks and the ambient knobs (logging, timeouts).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from unleash_provider.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    ENV_AUTHORIZATION,
    ENV_BASE_URL,
    ENV_LOG_LEVEL,
    VERBOSE_LOG_LEVELS,
)


class Settings(BaseSettings):
    """Provider configuration loaded from environment variables.

    Settings are read when the provider is configured rather than at import
    time, so a changed environment is picked up by the next configuration.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # Provider attribute fallbacks
    unleash_url: str = Field(
        default="",
        validation_alias=ENV_BASE_URL,
        description="Unleash base URL used when base_url is not configured",
    )
    auth_token: str = Field(
        default="",
        validation_alias=ENV_AUTHORIZATION,
        description="Unleash API token used when authorization is not configured",
        repr=False,
    )

    # Logging configuration
    tf_log: str = Field(
        default="",
        validation_alias=ENV_LOG_LEVEL,
        description="Host log level; debug or trace enables HTTP tracing",
    )
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        validation_alias="JSON_LOGS",
        description="Enable JSON formatted logging for structured log aggregation",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="CORRELATION_IDS",
        description="Enable correlation IDs in logs for request tracing",
    )

    # HTTP client behavior
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        validation_alias="UNLEASH_REQUEST_TIMEOUT",
        description="Timeout in seconds for each Unleash API request",
    )
    verify_ssl: bool = Field(
        default=True,
        validation_alias="UNLEASH_VERIFY_SSL",
        description="Verify TLS certificates of the Unleash server",
    )

    @property
    def is_debug(self) -> bool:
        """Whether request and response bodies should be traced."""
        return self.tf_log.strip().lower() in VERBOSE_LOG_LEVELS

"""
Provider error hierarchy with categorization and diagnostic conversion.

This module defines the error types used throughout the Unleash provider.
Errors are raised where a failure is detected and turned into diagnostics at
the lifecycle seam (provider configure, resource and data source calls).
"""

from unleash_provider.constants import BODY_PREVIEW_LIMIT
from unleash_provider.framework.diagnostics import Diagnostic, Severity


class ProviderError(Exception):
    """
    Base error class for all provider-related exceptions.

    Provides categorization and user guidance for resolution.
    """

    def __init__(
        self,
        message: str,
        category: str,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize provider error.

        Args:
            message: Human-readable error description
            category: Error category (configuration, api, compatibility, not_found)
            user_action: What the operator should do to resolve the issue
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.category = category
        self.user_action = user_action
        self.cause = cause

    def as_diagnostic(self, summary: str) -> Diagnostic:
        """Convert to an error diagnostic with the given summary."""
        return Diagnostic(Severity.ERROR, summary, str(self))

    def __str__(self) -> str:
        """Enhanced string representation with user guidance."""
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class ConfigurationError(ProviderError):
    """Error in provider configuration."""

    def __init__(self, message: str, user_action: str | None = None):
        super().__init__(
            message=message,
            category="configuration",
            user_action=user_action or "Review and correct provider configuration",
        )


class UnleashAPIError(ProviderError):
    """Error communicating with the Unleash Admin API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        cause: Exception | None = None,
    ):
        if status_code:
            message = f"HTTP {status_code}: {message}"

        super().__init__(
            message=message,
            category="api",
            user_action=None
            if status_code == 404
            else "Check Unleash server status and API token permissions",
            cause=cause,
        )
        self.status_code = status_code
        self.response_body = response_body

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def body_preview(self, limit: int = BODY_PREVIEW_LIMIT) -> str | None:
        """Return a truncated preview of the response body for logging."""
        if self.response_body is None:
            return None

        if len(self.response_body) <= limit:
            return self.response_body

        return f"{self.response_body[:limit]}...<truncated>"

    def __str__(self) -> str:
        base_msg = super().__str__()
        preview = self.body_preview()
        if preview:
            return f"{base_msg}\nResponse body: {preview}"
        return base_msg


class NotFoundError(ProviderError):
    """A looked-up entity does not exist on the Unleash server."""

    def __init__(self, kind: str, key: str):
        super().__init__(
            message=f"{kind} '{key}' was not found",
            category="not_found",
            user_action=f"Check that the {kind} exists on the Unleash server",
        )
        self.kind = kind
        self.key = key


class VersionCompatibilityError(ProviderError):
    """The Unleash server version is unsupported or unreadable."""

    def __init__(self, message: str, user_action: str | None = None):
        super().__init__(
            message=message,
            category="compatibility",
            user_action=user_action or "Upgrade the Unleash server",
        )

"""
Error handling module for the Unleash provider.

This module provides an error hierarchy with clear categorization for
configuration, API, lookup and version compatibility failures.
"""

from .provider_errors import (
    ConfigurationError,
    NotFoundError,
    ProviderError,
    UnleashAPIError,
    VersionCompatibilityError,
)

__all__ = [
    "ProviderError",
    "ConfigurationError",
    "UnleashAPIError",
    "NotFoundError",
    "VersionCompatibilityError",
]

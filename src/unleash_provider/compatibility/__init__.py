"""Unleash server version compatibility gate."""

from .version import (
    MINIMUM_VERSION,
    SemanticVersion,
    check_is_supported_version,
    ensure_supported_version,
    parse_version,
    version_check,
)

__all__ = [
    "MINIMUM_VERSION",
    "SemanticVersion",
    "check_is_supported_version",
    "ensure_supported_version",
    "parse_version",
    "version_check",
]

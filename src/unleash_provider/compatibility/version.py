"""
Unleash server version compatibility checks.

The provider relies on Admin API endpoints that only exist from a given
Unleash release onwards. Configuration therefore reads the server version
once and:
1. Rejects servers older than the minimum supported version
2. Rejects version strings that cannot be parsed
3. Warns when the server is not running the latest release
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unleash_provider.constants import MINIMUM_UNLEASH_VERSION
from unleash_provider.errors import UnleashAPIError, VersionCompatibilityError
from unleash_provider.framework.diagnostics import Diagnostics

if TYPE_CHECKING:
    from unleash_provider.utils.unleash_admin import UnleashAdminClient

logger = logging.getLogger(__name__)

_VERSION_PATTERN = re.compile(
    r"^v?(?P<major>\d+)(?:\.(?P<minor>\d+))?(?:\.(?P<patch>\d+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?(?:\+(?P<build>[0-9A-Za-z.-]+))?$"
)


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """
    Parsed semantic version.

    Ordering only looks at major, minor and patch, so a pre-release of the
    minimum version (e.g. 5.6.0-beta.1) is accepted as 5.6.0.
    """

    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version: str) -> SemanticVersion:
    """
    Parse a semantic version string.

    Args:
        version: Version string (e.g. "5.6.0", "v5.7", "6.0.0-beta.2+build.1")

    Returns:
        SemanticVersion

    Raises:
        ValueError: If the string is not a semantic version
    """
    match = _VERSION_PATTERN.match(version.strip())
    if not match:
        raise ValueError(f"Invalid version string: '{version}'")

    return SemanticVersion(
        major=int(match["major"]),
        minor=int(match["minor"] or 0),
        patch=int(match["patch"] or 0),
    )


MINIMUM_VERSION = parse_version(MINIMUM_UNLEASH_VERSION)

# Shown when the server does not report a latest release
UNKNOWN_VERSION = "unknown"


def ensure_supported_version(version: str) -> SemanticVersion:
    """
    Parse a server version and require it to be at least the minimum.

    Raises:
        VersionCompatibilityError: If the version is unreadable or too old
    """
    try:
        parsed = parse_version(version)
    except ValueError as e:
        raise VersionCompatibilityError(
            str(e), user_action="Check the Unleash server reports a valid version"
        ) from e

    if parsed < MINIMUM_VERSION:
        raise VersionCompatibilityError(
            f"You're using version {version}, while the provider requires "
            f"at least {MINIMUM_UNLEASH_VERSION}"
        )

    return parsed


def check_is_supported_version(version: str, diagnostics: Diagnostics) -> bool:
    """
    Record an error diagnostic when the version is unsupported or unreadable.

    Returns:
        True if the version is supported
    """
    try:
        ensure_supported_version(version)
    except VersionCompatibilityError as e:
        summary = (
            f"Unable read unleash version from string {version}"
            if isinstance(e.__cause__, ValueError)
            else "Unsupported Unleash version"
        )
        diagnostics.append(e.as_diagnostic(summary))
        return False
    return True


async def version_check(
    client: UnleashAdminClient, diagnostics: Diagnostics
) -> None:
    """
    Check the remote server version once at configuration time.

    Args:
        client: Shared Unleash Admin client
        diagnostics: Collection receiving errors and warnings
    """
    try:
        ui_config = await client.get_ui_config()
    except UnleashAPIError as e:
        diagnostics.append(e.as_diagnostic("Unable to read Unleash server version"))
        return

    version_info = ui_config.version_info
    if not version_info.is_latest:
        latest_oss = version_info.latest.oss or UNKNOWN_VERSION
        latest_enterprise = version_info.latest.enterprise or UNKNOWN_VERSION
        diagnostics.add_warning(
            "You're not using the latest Unleash version, consider upgrading",
            f"You're using version {ui_config.version}, the latest unleash-server "
            f"is {latest_oss}, while the latest enterprise version "
            f"is: {latest_enterprise}",
        )

    if check_is_supported_version(ui_config.version, diagnostics):
        logger.info(
            f"Found a supported Unleash version: {ui_config.version}",
            extra={"unleash_version": ui_config.version},
        )

"""Unit tests for Unleash server version compatibility checks."""

from unittest.mock import MagicMock

import pytest

from tests.helpers import api_error, ui_config
from unleash_provider.compatibility import (
    MINIMUM_VERSION,
    SemanticVersion,
    check_is_supported_version,
    ensure_supported_version,
    parse_version,
    version_check,
)
from unleash_provider.errors import VersionCompatibilityError
from unleash_provider.framework import Diagnostics
from unleash_provider.models.unleash_api import UiConfigRepresentation
from unleash_provider.utils.unleash_admin import UnleashAdminClient


class TestParseVersion:
    """Tests for semantic version parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("5.6.0", SemanticVersion(5, 6, 0)),
            ("v5.7", SemanticVersion(5, 7, 0)),
            ("6", SemanticVersion(6, 0, 0)),
            ("5.6.0-beta.1", SemanticVersion(5, 6, 0)),
            ("6.0.0+build.7", SemanticVersion(6, 0, 0)),
        ],
    )
    def test_valid_versions(self, value, expected):
        assert parse_version(value) == expected

    @pytest.mark.parametrize("value", ["", "latest", "5.x", "five.six"])
    def test_invalid_versions(self, value):
        with pytest.raises(ValueError, match="Invalid version string"):
            parse_version(value)

    def test_ordering(self):
        assert SemanticVersion(5, 5, 9) < MINIMUM_VERSION
        assert SemanticVersion(5, 10, 0) > MINIMUM_VERSION
        assert str(MINIMUM_VERSION) == "5.6.0"


class TestSupportedVersion:
    """Tests for the minimum version gate."""

    @pytest.mark.parametrize("version", ["5.6.0", "5.7.0", "5.6.0-beta.1", "6.1.2"])
    def test_supported(self, version):
        diagnostics = Diagnostics()
        assert check_is_supported_version(version, diagnostics) is True
        assert not diagnostics

    def test_too_old_is_rejected(self):
        diagnostics = Diagnostics()

        assert check_is_supported_version("5.5.9", diagnostics) is False

        error = diagnostics.errors[0]
        assert error.summary == "Unsupported Unleash version"
        assert (
            "You're using version 5.5.9, while the provider requires at least 5.6.0"
            in error.detail
        )

    def test_unreadable_is_rejected(self):
        diagnostics = Diagnostics()

        assert check_is_supported_version("not-a-version", diagnostics) is False

        assert diagnostics.errors[0].summary == (
            "Unable read unleash version from string not-a-version"
        )

    def test_ensure_raises(self):
        with pytest.raises(VersionCompatibilityError):
            ensure_supported_version("4.22.0")


def client_returning(body=None, error=None) -> MagicMock:
    client = MagicMock(spec=UnleashAdminClient)
    if error is not None:
        client.get_ui_config.side_effect = error
    else:
        client.get_ui_config.return_value = UiConfigRepresentation.model_validate(
            body
        )
    return client


class TestVersionCheck:
    """Tests for the configuration-time version check."""

    @pytest.mark.asyncio
    async def test_latest_supported_version(self):
        diagnostics = Diagnostics()

        await version_check(client_returning(ui_config("5.7.0")), diagnostics)

        assert not diagnostics

    @pytest.mark.asyncio
    async def test_outdated_server_warns(self):
        """Should warn, not fail, when a newer release exists."""
        diagnostics = Diagnostics()
        body = ui_config(
            "5.6.0", is_latest=False, latest_oss="5.9.0", latest_enterprise="5.9.1"
        )

        await version_check(client_returning(body), diagnostics)

        assert not diagnostics.has_error
        warning = diagnostics.warnings[0]
        assert warning.summary == (
            "You're not using the latest Unleash version, consider upgrading"
        )
        assert "5.9.0" in warning.detail
        assert "5.9.1" in warning.detail

    @pytest.mark.asyncio
    async def test_outdated_server_without_latest_versions(self):
        """Should name unknown latest versions instead of printing None."""
        diagnostics = Diagnostics()
        body = ui_config("5.6.0", is_latest=False)
        body["versionInfo"]["latest"] = {}

        await version_check(client_returning(body), diagnostics)

        detail = diagnostics.warnings[0].detail
        assert "None" not in detail
        assert "the latest unleash-server is unknown" in detail
        assert "latest enterprise version is: unknown" in detail

    @pytest.mark.asyncio
    async def test_old_and_outdated_reports_both(self):
        diagnostics = Diagnostics()

        await version_check(
            client_returning(ui_config("5.5.0", is_latest=False)), diagnostics
        )

        assert len(diagnostics.warnings) == 1
        assert len(diagnostics.errors) == 1

    @pytest.mark.asyncio
    async def test_unreachable_server(self):
        diagnostics = Diagnostics()

        await version_check(client_returning(error=api_error(401)), diagnostics)

        assert diagnostics.errors[0].summary == "Unable to read Unleash server version"
        assert "HTTP 401" in diagnostics.errors[0].detail

"""Shared pytest fixtures for Unleash provider unit tests."""

from unittest.mock import MagicMock

import pytest

from unleash_provider.framework import ProviderData
from unleash_provider.utils.unleash_admin import UnleashAdminClient

ENV_VARS = (
    "UNLEASH_URL",
    "AUTH_TOKEN",
    "TF_LOG",
    "LOG_LEVEL",
    "JSON_LOGS",
    "CORRELATION_IDS",
    "UNLEASH_REQUEST_TIMEOUT",
    "UNLEASH_VERIFY_SSL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep provider settings independent of the developer's environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_client():
    """Admin client double whose async methods are AsyncMocks."""
    client = MagicMock(spec=UnleashAdminClient)
    client.base_url = "https://unleash.example.com"
    return client


@pytest.fixture
def provider_data(mock_client) -> ProviderData:
    return ProviderData(client=mock_client)

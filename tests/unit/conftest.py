"""Unit test specific fixtures."""

import pytest

from helio_taverna_sdk import dependencies
from tests.envs import setup_unit_test_env


class _BlockedHttpClient:  # pragma: no cover - constructor raises immediately
    def __init__(self, *args, **kwargs):
        raise RuntimeError(
            "HTTP clients are blocked in unit tests; inject a stub client instead."
        )


@pytest.fixture(autouse=True)
def set_unit_test_env(monkeypatch):
    """Setup environment variables for unit tests.

    Note: Monkeypatch only works for in-process execution.
    """
    setup_unit_test_env(monkeypatch)
    monkeypatch.setattr("httpx.Client", _BlockedHttpClient, raising=True)


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Make every test read settings from its own environment."""
    providers = (
        dependencies.get_server_settings,
        dependencies.get_registry_settings,
        dependencies.get_identifier_catalog,
        dependencies.get_registry_configuration,
    )
    for provider in providers:
        provider.cache_clear()
    yield
    for provider in providers:
        provider.cache_clear()

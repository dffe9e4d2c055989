"""SDK test fixtures ensuring isolation from production services."""

import pytest


@pytest.fixture(autouse=True)
def configure_sdk_test_env(monkeypatch):
    """Force SDK tests to operate entirely with mocks."""

    monkeypatch.setenv("TAVERNA_USE_MOCK_SERVER", "true")
    monkeypatch.setenv("HELIO_USE_MOCK_REGISTRY", "true")

    class _BlockedHttpClient:  # pragma: no cover - constructor raises immediately
        def __init__(self, *args, **kwargs):
            raise RuntimeError(
                "HTTP clients are blocked in SDK tests; inject a stub client instead."
            )

    try:
        monkeypatch.setattr(
            "helio_taverna_sdk.server_client.client.httpx.Client",
            _BlockedHttpClient,
        )
    except ModuleNotFoundError as exc:  # pragma: no cover - explicit failure path
        raise RuntimeError(
            "helio_taverna_sdk is not available. Install the package before running SDK tests."
        ) from exc

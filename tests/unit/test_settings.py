"""Unit tests for the SDK settings models."""

from helio_taverna_sdk.config import RegistrySettings, TavernaServerSettings
from helio_taverna_sdk.registry_client import (
    IdentifierCatalog,
    InterfaceType,
    MockRegistryClient,
    RegistryConfiguration,
)
from helio_taverna_sdk.server_client.connection import TAVERNA_SOAP_INTERFACE


def test_server_settings_defaults(monkeypatch):
    monkeypatch.delenv("TAVERNA_USE_MOCK_SERVER", raising=False)
    monkeypatch.delenv("TAVERNA_SERVER_TIMEOUT_SECONDS", raising=False)

    settings = TavernaServerSettings()

    assert str(settings.default_address) == "http://localhost:8080/taverna-server/soap/"
    assert settings.timeout_seconds == 60.0
    assert settings.use_mock_server is False


def test_server_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TAVERNA_SERVER_URL", "http://taverna.example.org/soap/")
    monkeypatch.setenv("TAVERNA_SERVER_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("TAVERNA_USE_MOCK_SERVER", "yes")

    settings = TavernaServerSettings()

    assert str(settings.default_address) == "http://taverna.example.org/soap/"
    assert settings.timeout_seconds == 5.0
    assert settings.use_mock_server is True


def test_registry_settings_identify_taverna_soap(monkeypatch):
    monkeypatch.delenv("HELIO_TAVERNA_SERVICE_NAME", raising=False)
    monkeypatch.setenv("HELIO_USE_MOCK_REGISTRY", "0")

    settings = RegistrySettings()

    assert settings.service_name == "taverna"
    assert settings.interface_type_name == "TAVERNA_SOAP"
    assert settings.interface_type_uri == "http://taverna/soap"
    assert settings.use_mock_registry is False


def test_registry_defaults_are_shared_with_catalog_and_mock(monkeypatch):
    for name in (
        "HELIO_TAVERNA_SERVICE_NAME",
        "HELIO_TAVERNA_INTERFACE_TYPE",
        "HELIO_TAVERNA_INTERFACE_URI",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = RegistrySettings()
    configuration = RegistryConfiguration.populate(IdentifierCatalog())
    mock_endpoint = MockRegistryClient().endpoints[0]

    assert configuration.service_name.key == settings.service_name
    assert configuration.interface_type == InterfaceType(
        name=settings.interface_type_name, uri=settings.interface_type_uri
    )
    assert mock_endpoint.interface_type == configuration.interface_type
    assert TAVERNA_SOAP_INTERFACE == settings.interface_type_name

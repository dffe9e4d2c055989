"""Unit tests for the dependency providers."""

from helio_taverna_sdk import dependencies
from helio_taverna_sdk.config import RegistrySettings, TavernaServerSettings
from helio_taverna_sdk.registry_client import (
    MockRegistryClient,
    RegistryApiClient,
    ServiceLocator,
)
from helio_taverna_sdk.server_client import (
    ENDPOINT_ADDRESS_PROPERTY,
    MockRunServiceChannel,
    SoapRunServiceChannel,
    UsernamePassword,
)
from tests.envs import setup_real_clients_env


class TestConfigurationProviders:
    """Test configuration provider functions."""

    def test_get_server_settings(self):
        assert isinstance(dependencies.get_server_settings(), TavernaServerSettings)

    def test_get_registry_settings(self):
        assert isinstance(dependencies.get_registry_settings(), RegistrySettings)

    def test_settings_are_cached(self):
        """Settings providers should use lru_cache and return the same instance."""
        dependencies.get_server_settings.cache_clear()
        settings1 = dependencies.get_server_settings()
        settings2 = dependencies.get_server_settings()
        assert settings1 is settings2

    def test_registry_configuration_registers_once(self):
        first = dependencies.get_registry_configuration()
        dependencies.get_registry_configuration.cache_clear()
        second = dependencies.get_registry_configuration()

        catalog = dependencies.get_identifier_catalog()
        assert first.service_name is second.service_name
        assert first.interface_type is second.interface_type
        assert len(catalog.service_names) == 1
        assert len(catalog.interface_types) == 1


class TestClientProviders:
    def test_mock_channel_when_enabled(self):
        channel = dependencies.get_run_service_channel("http://mock.test/soap/")

        assert isinstance(channel, MockRunServiceChannel)
        assert channel.default_address == "http://mock.test/soap/"

    def test_soap_channel_when_mock_disabled(self, monkeypatch):
        setup_real_clients_env(monkeypatch)

        channel = dependencies.get_run_service_channel("http://taverna.example.org/soap/")

        assert isinstance(channel, SoapRunServiceChannel)
        assert channel.address == "http://taverna.example.org/soap/"

    def test_mock_registry_when_enabled(self):
        assert isinstance(dependencies.get_registry_client(), MockRegistryClient)

    def test_registry_api_client_when_mock_disabled(self, monkeypatch):
        setup_real_clients_env(monkeypatch)

        client = dependencies.get_registry_client()

        assert isinstance(client, RegistryApiClient)
        assert client.base_url == "http://registry.example.org/api"

    def test_get_service_locator(self):
        locator = dependencies.get_service_locator()

        assert isinstance(locator, ServiceLocator)
        assert locator.configuration.service_name.key == "taverna"


class TestConnectionProviders:
    def test_get_server_connection_default_address(self):
        connection = dependencies.get_server_connection()

        assert isinstance(connection.channel, MockRunServiceChannel)
        assert connection.endpoint.url == "http://localhost:8080/taverna-server/soap/"
        assert dict(connection.transport_properties) == {}

    def test_get_server_connection_with_credentials(self):
        connection = dependencies.get_server_connection(
            "http://example.org/taverna",
            UsernamePassword(username="solar", password="flare"),
        )

        assert connection.transport_properties[ENDPOINT_ADDRESS_PROPERTY] == (
            "http://example.org/taverna"
        )
        assert connection.get_max_runs() == 5

    def test_discover_server_connection_uses_mock_registry(self):
        connection = dependencies.discover_server_connection("abc123")

        assert connection.endpoint.url == "http://mock.test/taverna-server/soap/"
        assert isinstance(connection.channel, MockRunServiceChannel)

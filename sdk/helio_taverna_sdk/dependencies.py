"""Central providers that assemble SDK objects from environment settings."""

from functools import lru_cache
from typing import Any, Optional

from .config import RegistrySettings, TavernaServerSettings
from .registry_client import (
    IdentifierCatalog,
    MockRegistryClient,
    RegistryApiClient,
    RegistryClientProtocol,
    RegistryConfiguration,
    ServiceLocator,
)
from .server_client import (
    Credentials,
    MockRunServiceChannel,
    RunServiceChannelProtocol,
    ServerConnection,
    SoapRunServiceChannel,
    connect,
)

# ============================================================================
# Configuration Providers
# ============================================================================


@lru_cache()
def get_server_settings() -> TavernaServerSettings:
    """Get the Taverna Server settings singleton."""
    return TavernaServerSettings()


@lru_cache()
def get_registry_settings() -> RegistrySettings:
    """Get the registry settings singleton."""
    return RegistrySettings()


@lru_cache()
def get_identifier_catalog() -> IdentifierCatalog:
    """Get the process-wide registry identifier catalog."""
    return IdentifierCatalog()


@lru_cache()
def get_registry_configuration() -> RegistryConfiguration:
    """Register the registry identifiers once and return them."""
    registry_settings = get_registry_settings()
    return RegistryConfiguration.populate(
        get_identifier_catalog(),
        service_name=registry_settings.service_name,
        interface_type_name=registry_settings.interface_type_name,
        interface_type_uri=registry_settings.interface_type_uri,
    )


# ============================================================================
# Client Providers
# ============================================================================


def get_run_service_channel(default_address: str) -> RunServiceChannelProtocol:
    """
    Build a run-service channel for the given default address.

    Args:
        default_address: Address used when the connection supplies none

    Returns:
        Run-service channel (mock or SOAP based on settings)
    """
    settings = get_server_settings()
    if settings.use_mock_server:
        return MockRunServiceChannel(default_address)

    return SoapRunServiceChannel(default_address, timeout=settings.timeout_seconds)


def get_registry_client() -> RegistryClientProtocol:
    """
    Get the registry client instance.

    Returns:
        Registry client (mock or real based on settings)
    """
    registry_settings = get_registry_settings()
    if registry_settings.use_mock_registry:
        return MockRegistryClient()

    return RegistryApiClient(
        base_url=str(registry_settings.registry_url).rstrip("/"),
        timeout=registry_settings.timeout_seconds,
    )


def get_service_locator() -> ServiceLocator:
    """Get a service locator wired to the configured registry."""
    return ServiceLocator(
        get_registry_client(),
        get_registry_configuration(),
        settings=get_server_settings(),
        channel_factory=get_run_service_channel,
    )


def get_server_connection(
    address: Optional[str] = None,
    credentials: Optional[Credentials] = None,
) -> ServerConnection:
    """
    Get a connection to an explicitly addressed (or the default) server.

    Args:
        address: Server endpoint address, or None for the configured default
        credentials: Identity to connect as, or None for anonymous access

    Returns:
        ServerConnection using the configured channel implementation
    """
    return connect(
        address,
        credentials,
        settings=get_server_settings(),
        channel_factory=get_run_service_channel,
    )


def discover_server_connection(security_token: Any) -> ServerConnection:
    """Resolve the server through the registry and connect with a security token."""
    return get_service_locator().resolve(security_token)

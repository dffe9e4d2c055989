"""HELIO service registry client exports."""

from .client import RegistryApiClient, RegistryError
from .identifiers import IdentifierCatalog, RegistryConfiguration
from .locator import ServiceLocator
from .mock import MockRegistryClient
from .protocol import RegistryClientProtocol
from .schemas import AccessInterface, InterfaceType, ServiceDescriptor, ServiceName

__all__ = [
    "RegistryApiClient",
    "RegistryError",
    "MockRegistryClient",
    "RegistryClientProtocol",
    "IdentifierCatalog",
    "RegistryConfiguration",
    "ServiceLocator",
    "AccessInterface",
    "InterfaceType",
    "ServiceDescriptor",
    "ServiceName",
]

"""Protocol definition for the HELIO service registry client."""

from typing import List, Optional, Protocol

from .schemas import AccessInterface, InterfaceType, ServiceDescriptor, ServiceName


class RegistryClientProtocol(Protocol):
    """Read-only lookups against the service registry."""

    def get_service_descriptor(self, service_name: ServiceName) -> ServiceDescriptor:
        """Return the registry description of the named service."""
        ...

    def get_all_endpoints(
        self,
        descriptor: ServiceDescriptor,
        capability: Optional[str] = None,
        interface_type: Optional[InterfaceType] = None,
    ) -> List[AccessInterface]:
        """Return every endpoint of the service, optionally filtered."""
        ...

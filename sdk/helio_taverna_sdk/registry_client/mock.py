"""Mock implementation of the registry client for local testing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from ..config.registry_settings import (
    DEFAULT_INTERFACE_TYPE_NAME,
    DEFAULT_INTERFACE_TYPE_URI,
)
from .schemas import AccessInterface, InterfaceType, ServiceDescriptor, ServiceName

if TYPE_CHECKING:
    from .protocol import RegistryClientProtocol


class MockRegistryClient:
    """In-memory registry that serves a fixed endpoint list."""

    def __init__(self, endpoints: Optional[Iterable[AccessInterface]] = None) -> None:
        if endpoints is None:
            endpoints = [
                AccessInterface(
                    url="http://mock.test/taverna-server/soap/",
                    interface_type=InterfaceType(
                        name=DEFAULT_INTERFACE_TYPE_NAME, uri=DEFAULT_INTERFACE_TYPE_URI
                    ),
                )
            ]
        self.endpoints: List[AccessInterface] = list(endpoints)
        self.call_history: List[Dict[str, Any]] = []

    def get_service_descriptor(self, service_name: ServiceName) -> ServiceDescriptor:
        self.call_history.append(
            {"operation": "get_service_descriptor", "service_name": service_name}
        )
        return ServiceDescriptor(name=service_name.key, label=service_name.key)

    def get_all_endpoints(
        self,
        descriptor: ServiceDescriptor,
        capability: Optional[str] = None,
        interface_type: Optional[InterfaceType] = None,
    ) -> List[AccessInterface]:
        self.call_history.append(
            {
                "operation": "get_all_endpoints",
                "descriptor": descriptor,
                "capability": capability,
                "interface_type": interface_type,
            }
        )
        if interface_type is None:
            return list(self.endpoints)
        return [item for item in self.endpoints if item.interface_type == interface_type]


if TYPE_CHECKING:
    # Interface check for static type analysis
    _: RegistryClientProtocol = MockRegistryClient()

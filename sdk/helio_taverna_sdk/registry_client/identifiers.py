"""Registration of the registry identifiers used to find Taverna Server."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from ..config.registry_settings import (
    DEFAULT_INTERFACE_TYPE_NAME,
    DEFAULT_INTERFACE_TYPE_URI,
    DEFAULT_SERVICE_NAME,
)
from .schemas import InterfaceType, ServiceName

logger = logging.getLogger(__name__)


class IdentifierCatalog:
    """Catalog of registered service names and interface types.

    Registering an identifier again with the same parameters returns the
    existing instance; registering it with different parameters is an error.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._service_names: Dict[str, ServiceName] = {}
        self._interface_types: Dict[str, InterfaceType] = {}

    def register_service_name(
        self, key: str, description: Optional[str] = None
    ) -> ServiceName:
        candidate = ServiceName(key=key, description=description)
        with self._lock:
            existing = self._service_names.get(key)
            if existing is not None:
                if existing != candidate:
                    raise ValueError(
                        f"Service name {key!r} is already registered with a different description"
                    )
                return existing
            self._service_names[key] = candidate
        logger.debug(f"Registered service name {key!r}")
        return candidate

    def register_interface_type(self, name: str, uri: str) -> InterfaceType:
        candidate = InterfaceType(name=name, uri=uri)
        with self._lock:
            existing = self._interface_types.get(name)
            if existing is not None:
                if existing != candidate:
                    raise ValueError(
                        f"Interface type {name!r} is already registered with URI {existing.uri!r}"
                    )
                return existing
            self._interface_types[name] = candidate
        logger.debug(f"Registered interface type {name!r} ({uri})")
        return candidate

    @property
    def service_names(self) -> Dict[str, ServiceName]:
        with self._lock:
            return dict(self._service_names)

    @property
    def interface_types(self) -> Dict[str, InterfaceType]:
        with self._lock:
            return dict(self._interface_types)


@dataclass(frozen=True)
class RegistryConfiguration:
    """Identifiers the service locator uses to find a Taverna Server."""

    service_name: ServiceName
    interface_type: InterfaceType

    @classmethod
    def populate(
        cls,
        catalog: IdentifierCatalog,
        *,
        service_name: str = DEFAULT_SERVICE_NAME,
        interface_type_name: str = DEFAULT_INTERFACE_TYPE_NAME,
        interface_type_uri: str = DEFAULT_INTERFACE_TYPE_URI,
    ) -> RegistryConfiguration:
        """Register both identifiers in the catalog and bundle them."""

        return cls(
            service_name=catalog.register_service_name(service_name),
            interface_type=catalog.register_interface_type(
                interface_type_name, interface_type_uri
            ),
        )

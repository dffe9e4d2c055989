"""HTTP client for the HELIO service registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from .schemas import AccessInterface, InterfaceType, ServiceDescriptor, ServiceName

if TYPE_CHECKING:
    from .protocol import RegistryClientProtocol

logger = logging.getLogger(__name__)


class RegistryError(RuntimeError):
    """Raised when the registry answers with an unusable payload."""


class RegistryApiClient:
    """Synchronous client for the registry's service and endpoint listings."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _http(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout)
        return self._client

    def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        try:
            response = self._http().get(path, params=params or None)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Registry request {path} failed: {e}")
            raise
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Registry returned invalid JSON for {path}: {e}")
            raise RegistryError(f"Invalid registry response for {path}: {e}") from e

    def get_service_descriptor(self, service_name: ServiceName) -> ServiceDescriptor:
        """Fetch the registry description of the named service.

        Raises:
            httpx.HTTPError: If the registry request fails
            RegistryError: If the registry response is malformed
        """
        data = self._get(f"/services/{service_name.key}")
        if not isinstance(data, dict):
            raise RegistryError("Registry service descriptor must be a JSON object")
        try:
            return ServiceDescriptor(**{"name": service_name.key, **data})
        except ValidationError as e:
            logger.error(f"Invalid service descriptor for {service_name.key}: {e}")
            raise RegistryError(f"Invalid service descriptor: {e}") from e

    def get_all_endpoints(
        self,
        descriptor: ServiceDescriptor,
        capability: Optional[str] = None,
        interface_type: Optional[InterfaceType] = None,
    ) -> List[AccessInterface]:
        """List the endpoints of a service in registry order.

        Raises:
            httpx.HTTPError: If the registry request fails
            RegistryError: If the registry response is malformed
        """
        params: Dict[str, str] = {}
        if capability:
            params["capability"] = capability
        if interface_type is not None:
            params["interface_type"] = interface_type.name

        data = self._get(f"/services/{descriptor.name}/endpoints", params)
        if isinstance(data, dict):
            data = data.get("endpoints")
        if not isinstance(data, list):
            raise RegistryError("Registry endpoint listing must be a JSON list")

        try:
            return [AccessInterface(**item) for item in data]
        except (TypeError, ValidationError) as e:
            logger.error(f"Invalid endpoint entry for {descriptor.name}: {e}")
            raise RegistryError(f"Invalid endpoint entry: {e}") from e

    def close(self) -> None:
        """Close the underlying HTTP client when this instance owns it."""

        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RegistryApiClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


if TYPE_CHECKING:
    # Static interface check to guarantee protocol compatibility during type checking
    _: RegistryClientProtocol = RegistryApiClient(base_url="http://localhost")

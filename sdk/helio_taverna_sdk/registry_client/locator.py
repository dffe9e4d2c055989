"""Discovery of a Taverna Server through the HELIO service registry."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import TavernaServerSettings
from ..errors import InvalidAddressError, ResolutionError
from ..server_client.connection import ChannelFactory, ServerConnection, connect
from ..server_client.credentials import SecurityToken
from ..server_client.schemas import ServiceEndpoint
from .client import RegistryError
from .identifiers import RegistryConfiguration
from .protocol import RegistryClientProtocol

logger = logging.getLogger(__name__)


class ServiceLocator:
    """Finds the Taverna Server endpoint published in the registry.

    The locator only reads from the registry. The identifiers it looks up
    are fixed by the configuration it is given, which is populated once when
    the process starts.
    """

    def __init__(
        self,
        registry: RegistryClientProtocol,
        configuration: RegistryConfiguration,
        *,
        settings: Optional[TavernaServerSettings] = None,
        channel_factory: Optional[ChannelFactory] = None,
    ) -> None:
        self._registry = registry
        self._configuration = configuration
        self._settings = settings
        self._channel_factory = channel_factory

    @property
    def configuration(self) -> RegistryConfiguration:
        return self._configuration

    def lookup(self) -> ServiceEndpoint:
        """Return the first registry endpoint speaking the expected interface type.

        Raises:
            ResolutionError: If the registry fails or lists no matching endpoint
        """
        service_name = self._configuration.service_name
        expected_type = self._configuration.interface_type

        try:
            descriptor = self._registry.get_service_descriptor(service_name)
            endpoints = self._registry.get_all_endpoints(descriptor, None, None)
        except (RegistryError, httpx.HTTPError, OSError) as exc:
            logger.error(f"Registry lookup for {service_name} failed: {exc}")
            raise ResolutionError(
                f"Registry lookup for {service_name} failed: {exc}",
                service_name=service_name.key,
            ) from exc

        for access_interface in endpoints:
            if access_interface.interface_type == expected_type:
                logger.info(
                    f"Resolved {service_name} to {access_interface.url} ({expected_type})"
                )
                return ServiceEndpoint(
                    url=access_interface.url, interface_type=expected_type.name
                )

        logger.error(f"No {expected_type} endpoint registered for {service_name}")
        raise ResolutionError(
            f"failed to do lookup for {expected_type} at {service_name}",
            service_name=service_name.key,
        )

    def resolve(self, security_token: Any) -> ServerConnection:
        """Connect to the registered server, identified by a security token.

        Raises:
            ResolutionError: If no usable endpoint can be found
        """
        endpoint = self.lookup()
        try:
            return connect(
                endpoint.url,
                SecurityToken(token=security_token),
                settings=self._settings,
                channel_factory=self._channel_factory,
                interface_type=endpoint.interface_type,
            )
        except InvalidAddressError as exc:
            logger.error(f"Registry listed an invalid address: {exc}")
            raise ResolutionError(
                f"Registry listed an invalid address for {self._configuration.service_name}: {exc}",
                service_name=self._configuration.service_name.key,
            ) from exc

"""Connections to a whole Taverna Server instance."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Mapping, Optional
from xml.etree import ElementTree

import httpx
from pydantic import HttpUrl, TypeAdapter, ValidationError

from ..config import TavernaServerSettings
from ..config.registry_settings import DEFAULT_INTERFACE_TYPE_NAME
from ..errors import (
    InvalidAddressError,
    RemoteCallFailed,
    RunCreationFailed,
    RunCreationRejected,
)
from .client import NoCreateFault, NoUpdateFault, SoapFault, SoapRunServiceChannel
from .credentials import Credentials, NoCredentials
from .protocol import (
    ENDPOINT_ADDRESS_PROPERTY,
    RunServiceChannelProtocol,
    WorkflowSource,
)
from .run import RunReference
from .schemas import CapabilitySnapshot, ServiceEndpoint
from .workflow import load_workflow

if TYPE_CHECKING:
    from .protocol import TavernaServerProtocol

logger = logging.getLogger(__name__)

TAVERNA_SOAP_INTERFACE = DEFAULT_INTERFACE_TYPE_NAME

ChannelFactory = Callable[[str], RunServiceChannelProtocol]

_HTTP_URL = TypeAdapter(HttpUrl)


def validate_address(address: Any) -> str:
    """Check that a service address is an absolute HTTP(S) URL and return it."""

    try:
        _HTTP_URL.validate_python(address)
    except ValidationError as exc:
        reason = "; ".join(error["msg"] for error in exc.errors())
        raise InvalidAddressError(address, reason) from exc
    return address


@contextmanager
def _remote_call(operation: str) -> Iterator[None]:
    """Translate channel failures into the SDK's error taxonomy."""

    try:
        yield
    except UnicodeEncodeError as exc:
        # httpx only accepts ASCII header values
        logger.error(f"Remote call {operation} could not encode its request: {exc}")
        raise RemoteCallFailed(
            operation, f"request headers are not ASCII-encodable: {exc}"
        ) from exc
    except (SoapFault, httpx.HTTPError, OSError) as exc:
        logger.error(f"Remote call {operation} failed: {exc}")
        raise RemoteCallFailed(operation, str(exc)) from exc


@contextmanager
def _run_creation() -> Iterator[None]:
    """Report the server's refusals to create a run as run-creation failures."""

    try:
        yield
    except NoCreateFault as exc:
        logger.error(f"Server refused to create run: {exc}")
        raise RunCreationRejected(f"Server refused to create run: {exc}") from exc
    except NoUpdateFault as exc:
        logger.error(f"Server failed to build run: {exc}")
        raise RunCreationFailed(f"Server failed to build run: {exc}") from exc


class ServerConnection:
    """Representation of a whole Taverna Server instance.

    A connection owns one run-service channel. The endpoint address and the
    identity implied by the credentials are attached to the channel once, at
    construction, and apply to every call made through it. Construction
    never touches the network; an unreachable server is only reported by the
    first operation.

    A connection is not safe for concurrent use unless its channel is.
    """

    def __init__(
        self,
        channel: RunServiceChannelProtocol,
        credentials: Optional[Credentials] = None,
        *,
        address: Optional[str] = None,
        interface_type: str = TAVERNA_SOAP_INTERFACE,
    ) -> None:
        self._channel = channel
        self._credentials = credentials if credentials is not None else NoCredentials()

        properties: Dict[str, Any] = {}
        if address is not None:
            properties[ENDPOINT_ADDRESS_PROPERTY] = validate_address(address)
        properties.update(self._credentials.transport_properties())

        # The context holds exactly this connection's identity, even on a reused channel
        channel.request_context.clear()
        channel.request_context.update(properties)

        self._endpoint = ServiceEndpoint(
            url=address if address is not None else channel.default_address,
            interface_type=interface_type,
        )
        logger.debug(
            f"Configured {self._credentials.kind} connection to {self._endpoint.url}"
        )

    @property
    def endpoint(self) -> ServiceEndpoint:
        return self._endpoint

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def channel(self) -> RunServiceChannelProtocol:
        return self._channel

    @property
    def transport_properties(self) -> Mapping[str, Any]:
        """Read-only view of the identity properties attached to the channel."""

        return MappingProxyType(self._channel.request_context)

    def create_run(self, workflow: WorkflowSource) -> RunReference:
        """Create a workflow run on the server.

        Args:
            workflow: A parsed t2flow document, or the path of a *local* file
                holding one.

        Returns:
            A handle to the workflow run, which is not yet started.

        Raises:
            WorkflowSourceError: If the file is not readable
            MalformedWorkflowError: If the file doesn't hold well-formed XML
            RunCreationRejected: If the server declined to create the run
            RunCreationFailed: If the server failed to build the run
            RemoteCallFailed: If the server could not be reached
        """
        if isinstance(workflow, ElementTree.ElementTree):
            workflow = workflow.getroot()
        elif not isinstance(workflow, ElementTree.Element):
            workflow = load_workflow(workflow)

        with _remote_call("create_run"), _run_creation():
            run = RunReference.from_workflow(self._channel, workflow)
        logger.info(f"Created run {run.run_id} on {self._endpoint.url}")
        return run

    def list_runs(self) -> List[RunReference]:
        """Return handles to the runs the current identity may read.

        The order is the server's and is not stable across calls.
        """
        with _remote_call("list_runs"):
            entries = self._channel.list_runs()
        return [RunReference(run_id=entry.value, channel=self._channel) for entry in entries]

    def get_notifier_protocols(self) -> List[str]:
        """Return the URI schemes that may be used for subscribed notifications.

        Others may be used, but will result in no notification being sent.
        """
        with _remote_call("get_notifier_protocols"):
            return self._channel.get_enabled_notification_fabrics()

    def get_max_runs(self) -> int:
        """Return the maximum number of runs the current user may have.

        Additional limits may be applied in practice (e.g. a global limit
        across all users) that this call does not report.
        """
        with _remote_call("get_max_runs"):
            return self._channel.get_max_simultaneous_runs()

    def get_listener_types(self) -> List[str]:
        """Return the listener types that may be attached to a run.

        The list may be empty when there are currently no runs at all.
        """
        with _remote_call("get_listener_types"):
            return self._channel.get_permitted_listener_types()

    def get_permitted_workflows(self) -> List[ElementTree.Element]:
        """Return the permitted workflows.

        An empty list means that *all* workflows are permitted.
        """
        with _remote_call("get_permitted_workflows"):
            entries = self._channel.get_permitted_workflows()

        workflows = []
        for entry in entries:
            if not entry.contents:
                logger.error("Permitted workflow entry carried no document")
                raise RemoteCallFailed(
                    "get_permitted_workflows",
                    "permitted workflow entry carried no document",
                )
            workflows.append(entry.contents[0])
        return workflows

    def get_capabilities(self) -> CapabilitySnapshot:
        """Query all capability metadata and bundle it into one snapshot."""

        return CapabilitySnapshot(
            notifier_protocols=self.get_notifier_protocols(),
            max_runs=self.get_max_runs(),
            listener_types=self.get_listener_types(),
            permitted_workflows=self.get_permitted_workflows(),
        )

    def close(self) -> None:
        """Release transport resources held by the channel, if any."""

        close = getattr(self._channel, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "ServerConnection":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def connect(
    address: Optional[str] = None,
    credentials: Optional[Credentials] = None,
    *,
    settings: Optional[TavernaServerSettings] = None,
    channel_factory: Optional[ChannelFactory] = None,
    interface_type: str = TAVERNA_SOAP_INTERFACE,
) -> ServerConnection:
    """Create a connection to a Taverna Server.

    Args:
        address: Address of the server endpoint; the configured default
            address is used when omitted.
        credentials: Identity to connect as; anonymous when omitted.
        settings: Connection settings; read from the environment when omitted.
        channel_factory: Builds the run-service channel from the default
            address; a SOAP channel is built when omitted.
        interface_type: Registry interface type recorded on the endpoint.

    Raises:
        InvalidAddressError: If ``address`` is not a valid URL
    """
    if address is not None:
        validate_address(address)

    settings = settings or TavernaServerSettings()
    default_address = str(settings.default_address)
    if channel_factory is not None:
        channel = channel_factory(default_address)
    else:
        channel = SoapRunServiceChannel(
            default_address, timeout=settings.timeout_seconds
        )
    return ServerConnection(
        channel, credentials, address=address, interface_type=interface_type
    )


if TYPE_CHECKING:
    # Static interface check to guarantee protocol compatibility during type checking
    _: TavernaServerProtocol = connect()

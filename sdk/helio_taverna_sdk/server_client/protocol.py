"""Protocol definitions for the Taverna Server client SDK."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Protocol, Union
from xml.etree import ElementTree

from .schemas import PermittedWorkflow, RemoteRun

if TYPE_CHECKING:
    from .run import RunReference

# Keys of the per-channel request context carrying transport identity.
ENDPOINT_ADDRESS_PROPERTY = "endpoint_address"
USERNAME_PROPERTY = "username"
PASSWORD_PROPERTY = "password"
HTTP_REQUEST_HEADERS = "http_request_headers"

SECURITY_TOKEN_HEADER = "Helio-Security-Token"

WorkflowSource = Union[ElementTree.Element, str, Path]


class RunServiceChannelProtocol(Protocol):
    """Remote procedure call channel bound to one Taverna Server endpoint."""

    default_address: str
    request_context: Dict[str, Any]

    def submit_workflow(self, workflow: ElementTree.Element) -> str:
        """Create a run from the workflow and return the new run identifier."""
        ...

    def list_runs(self) -> List[RemoteRun]:
        """Return the runs visible to the channel's identity."""
        ...

    def get_enabled_notification_fabrics(self) -> List[str]:
        """Return the URI schemes enabled for notifications."""
        ...

    def get_max_simultaneous_runs(self) -> int:
        """Return the per-user limit on simultaneous runs."""
        ...

    def get_permitted_listener_types(self) -> List[str]:
        """Return the listener type names that may be attached to runs."""
        ...

    def get_permitted_workflows(self) -> List[PermittedWorkflow]:
        """Return the workflow allow-list."""
        ...


class TavernaServerProtocol(Protocol):
    """Typed interface for Taverna Server connections."""

    def create_run(self, workflow: WorkflowSource) -> "RunReference":
        """Create (but do not start) a run of the given workflow."""
        ...

    def list_runs(self) -> List["RunReference"]:
        """Return handles to the runs the current identity may read."""
        ...

    def get_notifier_protocols(self) -> List[str]:
        """Return the protocols usable for subscribed notifications."""
        ...

    def get_max_runs(self) -> int:
        """Return the per-user limit on simultaneous runs."""
        ...

    def get_listener_types(self) -> List[str]:
        """Return the listener types that may be attached to a run."""
        ...

    def get_permitted_workflows(self) -> List[ElementTree.Element]:
        """Return the allow-listed workflows; empty means all are permitted."""
        ...

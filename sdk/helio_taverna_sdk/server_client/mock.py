"""Mock implementation of the run-service channel for local testing."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional
from xml.etree import ElementTree

from .schemas import PermittedWorkflow, RemoteRun

if TYPE_CHECKING:
    from .protocol import RunServiceChannelProtocol


class MockRunServiceChannel:
    """In-memory channel that simulates a Taverna Server run service."""

    def __init__(
        self,
        default_address: str = "http://mock.test/taverna-server/soap/",
        *,
        max_runs: int = 5,
        notification_fabrics: Optional[Iterable[str]] = None,
        listener_types: Optional[Iterable[str]] = None,
        permitted_workflows: Optional[Iterable[ElementTree.Element]] = None,
    ) -> None:
        self.default_address = default_address
        self.request_context: Dict[str, Any] = {}
        self.call_history: List[Dict[str, Any]] = []
        self.runs: Dict[str, ElementTree.Element] = {}
        self.max_runs = max_runs
        if notification_fabrics is None:
            notification_fabrics = ["mailto", "xmpp"]
        self.notification_fabrics = list(notification_fabrics)
        self.listener_types = list(listener_types or [])
        self.permitted_workflows = list(permitted_workflows or [])
        self.fail_with: Dict[str, Exception] = {}

    def _record(self, operation: str, **arguments: Any) -> None:
        self.call_history.append({"operation": operation, **arguments})
        error = self.fail_with.get(operation)
        if error is not None:
            raise error

    def submit_workflow(self, workflow: ElementTree.Element) -> str:
        """Store the workflow under a fresh run identifier."""

        self._record("submit_workflow", workflow=workflow)
        run_id = str(uuid.uuid4())
        self.runs[run_id] = workflow
        return run_id

    def list_runs(self) -> List[RemoteRun]:
        self._record("list_runs")
        return [RemoteRun(value=run_id) for run_id in self.runs]

    def get_enabled_notification_fabrics(self) -> List[str]:
        self._record("get_enabled_notification_fabrics")
        return list(self.notification_fabrics)

    def get_max_simultaneous_runs(self) -> int:
        self._record("get_max_simultaneous_runs")
        return self.max_runs

    def get_permitted_listener_types(self) -> List[str]:
        self._record("get_permitted_listener_types")
        return list(self.listener_types)

    def get_permitted_workflows(self) -> List[PermittedWorkflow]:
        self._record("get_permitted_workflows")
        return [PermittedWorkflow(contents=[item]) for item in self.permitted_workflows]

    def close(self) -> None:
        return None


if TYPE_CHECKING:
    # Interface check for static type analysis
    _: RunServiceChannelProtocol = MockRunServiceChannel()

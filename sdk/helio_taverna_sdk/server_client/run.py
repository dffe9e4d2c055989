"""Handles to workflow runs held on a Taverna Server."""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.etree import ElementTree

from .protocol import RunServiceChannelProtocol


@dataclass(frozen=True)
class RunReference:
    """Reference to one run on the server, bound to the channel that found it.

    Runs created through this handle are not started; starting, status
    polling and listener management belong to the run itself.
    """

    run_id: str
    channel: RunServiceChannelProtocol = field(compare=False, repr=False)

    @classmethod
    def from_workflow(
        cls, channel: RunServiceChannelProtocol, workflow: ElementTree.Element
    ) -> RunReference:
        """Submit the workflow over the channel and wrap the new run's id."""

        return cls(run_id=channel.submit_workflow(workflow), channel=channel)

    def __str__(self) -> str:
        return self.run_id

"""Pydantic models used by the Taverna Server client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
from xml.etree import ElementTree

from pydantic import BaseModel, ConfigDict, Field


def canonical_xml(element: ElementTree.Element) -> str:
    """Return the C14N form of an element, ignoring insignificant whitespace."""

    return ElementTree.canonicalize(
        ElementTree.tostring(element, encoding="unicode"), strip_text=True
    )


class ServiceEndpoint(BaseModel):
    """Network address of a Taverna Server endpoint."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Address the run-service channel targets.")
    interface_type: str = Field(
        ..., description="Registry interface type the endpoint speaks."
    )


class CapabilitySnapshot(BaseModel):
    """Point-in-time bundle of server capability metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    notifier_protocols: List[str] = Field(
        default_factory=list,
        description="URI schemes usable for subscribed notifications.",
    )
    max_runs: int = Field(
        ...,
        description=(
            "Per-user run limit. A stricter global limit may still apply on the "
            "server and is not reported here."
        ),
    )
    listener_types: List[str] = Field(
        default_factory=list,
        description="Listener types that may be attached to a run.",
    )
    permitted_workflows: List[ElementTree.Element] = Field(
        default_factory=list,
        description="Allow-listed workflows; empty means every workflow is permitted.",
    )

    @property
    def unrestricted(self) -> bool:
        """True when the server places no restriction on submitted workflows."""

        return not self.permitted_workflows

    def permits(self, workflow: ElementTree.Element) -> bool:
        """Return whether the server would accept the given workflow document."""

        if self.unrestricted:
            return True
        candidate = canonical_xml(workflow)
        return any(canonical_xml(item) == candidate for item in self.permitted_workflows)


@dataclass(frozen=True)
class RemoteRun:
    """Run entry as returned by the server's run listing."""

    value: str


@dataclass(frozen=True)
class PermittedWorkflow:
    """Allow-list entry wrapping the permitted workflow document."""

    contents: List[ElementTree.Element] = field(default_factory=list)

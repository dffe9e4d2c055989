"""SOAP channel for talking to a Taverna Server over HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from xml.etree import ElementTree

import httpx

from .protocol import (
    ENDPOINT_ADDRESS_PROPERTY,
    HTTP_REQUEST_HEADERS,
    PASSWORD_PROPERTY,
    USERNAME_PROPERTY,
)
from .schemas import PermittedWorkflow, RemoteRun

if TYPE_CHECKING:
    from .protocol import RunServiceChannelProtocol

logger = logging.getLogger(__name__)

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
TAVERNA_SOAP_NS = "http://ns.taverna.org.uk/2010/xml/server/soap/"


class SoapFault(RuntimeError):
    """Raised when the server answers a call with a SOAP fault."""

    def __init__(
        self,
        message: str,
        fault_code: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.fault_code = fault_code
        self.detail = detail


class NoCreateFault(SoapFault):
    """The server declined to create a run."""


class NoUpdateFault(SoapFault):
    """The server failed to update a run while building it."""


_FAULT_TYPES = {
    "NoCreateException": NoCreateFault,
    "NoUpdateException": NoUpdateFault,
}


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _text(element: ElementTree.Element) -> str:
    return (element.text or "").strip()


def build_envelope(operation: str, *arguments: ElementTree.Element) -> bytes:
    """Serialize a SOAP 1.1 request envelope for the given operation."""

    envelope = ElementTree.Element(f"{{{SOAP_ENV_NS}}}Envelope")
    body = ElementTree.SubElement(envelope, f"{{{SOAP_ENV_NS}}}Body")
    request = ElementTree.SubElement(body, f"{{{TAVERNA_SOAP_NS}}}{operation}")
    request.extend(arguments)
    return ElementTree.tostring(envelope, encoding="utf-8", xml_declaration=True)


def _fault_from_element(fault: ElementTree.Element) -> SoapFault:
    fault_code = fault.findtext("faultcode")
    message = fault.findtext("faultstring") or "SOAP fault without faultstring"
    detail = fault.find("detail")
    detail_name = None
    if detail is not None and len(detail):
        detail_name = _local_name(detail[0].tag)
    fault_type = _FAULT_TYPES.get(detail_name or "", SoapFault)
    return fault_type(message.strip(), fault_code=fault_code, detail=detail_name)


class SoapRunServiceChannel:
    """Synchronous SOAP client for the Taverna Server run-service interface.

    Transport identity is read from ``request_context`` on every call, so
    the owning connection configures it once and never touches it again.
    The HTTP client is created on first use; constructing a channel never
    opens a connection.
    """

    def __init__(
        self,
        default_address: str,
        timeout: float = 60.0,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.default_address = default_address
        self.timeout = timeout
        self.request_context: Dict[str, Any] = {}
        self._client = client
        self._owns_client = client is None

    @property
    def address(self) -> str:
        """Address that calls are currently sent to."""

        return self.request_context.get(ENDPOINT_ADDRESS_PROPERTY, self.default_address)

    def _http(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": '""',
        }
        extra: Dict[str, List[str]] = self.request_context.get(HTTP_REQUEST_HEADERS, {})
        for name, values in extra.items():
            headers[name] = ", ".join(values)
        return headers

    def _auth(self) -> Optional[tuple[str, str]]:
        username = self.request_context.get(USERNAME_PROPERTY)
        if username is None:
            return None
        return username, self.request_context.get(PASSWORD_PROPERTY) or ""

    def _invoke(
        self, operation: str, *arguments: ElementTree.Element
    ) -> List[ElementTree.Element]:
        """Call an operation and return the ``return`` elements of its response."""

        response = self._http().post(
            self.address,
            content=build_envelope(operation, *arguments),
            headers=self._headers(),
            auth=self._auth(),
        )

        try:
            envelope = ElementTree.fromstring(response.content)
        except ElementTree.ParseError as exc:
            response.raise_for_status()
            raise SoapFault(f"{operation} returned a non-XML response") from exc

        body = envelope.find(f"{{{SOAP_ENV_NS}}}Body")
        if body is None:
            response.raise_for_status()
            raise SoapFault(f"{operation} response has no SOAP body")

        fault = body.find(f"{{{SOAP_ENV_NS}}}Fault")
        if fault is not None:
            error = _fault_from_element(fault)
            logger.error(f"{operation} faulted: {error}")
            raise error

        response.raise_for_status()
        if not len(body):
            raise SoapFault(f"{operation} response body is empty")
        return [child for child in body[0] if _local_name(child.tag) == "return"]

    def submit_workflow(self, workflow: ElementTree.Element) -> str:
        """Submit a workflow and return the identifier of the created run."""

        wrapper = ElementTree.Element("workflow")
        wrapper.append(workflow)
        returned = self._invoke("submitWorkflow", wrapper)
        if not returned or not _text(returned[0]):
            raise SoapFault("submitWorkflow response carried no run reference")
        return _text(returned[0])

    def list_runs(self) -> List[RemoteRun]:
        return [RemoteRun(value=_text(item)) for item in self._invoke("listRuns")]

    def get_enabled_notification_fabrics(self) -> List[str]:
        return [_text(item) for item in self._invoke("getEnabledNotificationFabrics")]

    def get_max_simultaneous_runs(self) -> int:
        returned = self._invoke("getMaxSimultaneousRuns")
        if not returned:
            raise SoapFault("getMaxSimultaneousRuns response carried no value")
        try:
            return int(_text(returned[0]))
        except ValueError as exc:
            raise SoapFault(
                f"getMaxSimultaneousRuns returned a non-integer: {_text(returned[0])!r}"
            ) from exc

    def get_permitted_listener_types(self) -> List[str]:
        return [_text(item) for item in self._invoke("getPermittedListenerTypes")]

    def get_permitted_workflows(self) -> List[PermittedWorkflow]:
        return [
            PermittedWorkflow(contents=list(item))
            for item in self._invoke("getPermittedWorkflows")
        ]

    def close(self) -> None:
        """Close the underlying HTTP client when this instance owns it."""

        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "SoapRunServiceChannel":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


if TYPE_CHECKING:
    # Static interface check to guarantee protocol compatibility during type checking
    _: RunServiceChannelProtocol = SoapRunServiceChannel("http://localhost")

"""Taverna Server client exports."""

from .client import NoCreateFault, NoUpdateFault, SoapFault, SoapRunServiceChannel
from .connection import ServerConnection, connect, validate_address
from .credentials import Credentials, NoCredentials, SecurityToken, UsernamePassword
from .mock import MockRunServiceChannel
from .protocol import (
    ENDPOINT_ADDRESS_PROPERTY,
    HTTP_REQUEST_HEADERS,
    PASSWORD_PROPERTY,
    SECURITY_TOKEN_HEADER,
    USERNAME_PROPERTY,
    RunServiceChannelProtocol,
    TavernaServerProtocol,
)
from .run import RunReference
from .schemas import CapabilitySnapshot, PermittedWorkflow, RemoteRun, ServiceEndpoint
from .workflow import load_workflow, parse_workflow

__all__ = [
    "ServerConnection",
    "connect",
    "validate_address",
    "SoapRunServiceChannel",
    "MockRunServiceChannel",
    "SoapFault",
    "NoCreateFault",
    "NoUpdateFault",
    "RunServiceChannelProtocol",
    "TavernaServerProtocol",
    "Credentials",
    "NoCredentials",
    "SecurityToken",
    "UsernamePassword",
    "RunReference",
    "CapabilitySnapshot",
    "PermittedWorkflow",
    "RemoteRun",
    "ServiceEndpoint",
    "load_workflow",
    "parse_workflow",
    "ENDPOINT_ADDRESS_PROPERTY",
    "HTTP_REQUEST_HEADERS",
    "PASSWORD_PROPERTY",
    "SECURITY_TOKEN_HEADER",
    "USERNAME_PROPERTY",
]

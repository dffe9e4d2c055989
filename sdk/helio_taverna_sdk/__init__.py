"""Python SDK for submitting workflows to a HELIO Taverna Server."""

from .errors import (
    InvalidAddressError,
    MalformedWorkflowError,
    RemoteCallFailed,
    ResolutionError,
    RunCreationFailed,
    RunCreationRejected,
    TavernaClientError,
    WorkflowSourceError,
)
from .registry_client import (
    IdentifierCatalog,
    MockRegistryClient,
    RegistryApiClient,
    RegistryConfiguration,
    ServiceLocator,
)
from .server_client import (
    CapabilitySnapshot,
    MockRunServiceChannel,
    NoCredentials,
    RunReference,
    SecurityToken,
    ServerConnection,
    SoapRunServiceChannel,
    UsernamePassword,
    connect,
)

__all__ = [
    "connect",
    "ServerConnection",
    "ServiceLocator",
    "RunReference",
    "CapabilitySnapshot",
    "NoCredentials",
    "SecurityToken",
    "UsernamePassword",
    "SoapRunServiceChannel",
    "MockRunServiceChannel",
    "RegistryApiClient",
    "MockRegistryClient",
    "IdentifierCatalog",
    "RegistryConfiguration",
    "TavernaClientError",
    "ResolutionError",
    "InvalidAddressError",
    "MalformedWorkflowError",
    "WorkflowSourceError",
    "RunCreationRejected",
    "RunCreationFailed",
    "RemoteCallFailed",
]

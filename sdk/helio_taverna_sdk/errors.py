"""Exception types raised by the Taverna Server SDK."""


class TavernaClientError(RuntimeError):
    """Base class for every failure surfaced by the SDK."""


class ResolutionError(TavernaClientError):
    """Raised when the registry cannot produce a matching server endpoint."""

    def __init__(self, message: str, service_name: str | None = None) -> None:
        super().__init__(message)
        self.service_name = service_name


class InvalidAddressError(TavernaClientError, ValueError):
    """Raised when a caller-supplied service address is not a valid URL."""

    def __init__(self, address: object, reason: str) -> None:
        super().__init__(f"Invalid service address: {address}: {reason}")
        self.address = address


class WorkflowSourceError(TavernaClientError):
    """Raised when a local workflow file cannot be read."""


class MalformedWorkflowError(TavernaClientError):
    """Raised when a local workflow file is not a well-formed XML document."""


class RunCreationRejected(TavernaClientError):
    """Raised when the server refuses to create a workflow run."""


class RunCreationFailed(TavernaClientError):
    """Raised when the server fails to build a workflow run it accepted."""


class RemoteCallFailed(TavernaClientError):
    """Raised when a remote call fails at the transport level."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation

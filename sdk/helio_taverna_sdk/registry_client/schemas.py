"""Pydantic models describing HELIO service registry entries."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceName(BaseModel):
    """Registry key under which a logical service is published."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Registry key of the service.")
    description: Optional[str] = Field(
        None, description="Human readable description of the service."
    )

    def __str__(self) -> str:
        return self.key


class InterfaceType(BaseModel):
    """Kind of access interface (protocol) an endpoint speaks."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Interface type name.")
    uri: str = Field(..., description="URI identifying the interface type.")

    def __str__(self) -> str:
        return self.name


class ServiceDescriptor(BaseModel):
    """Registry description of a logical service."""

    name: str = Field(..., description="Registry key of the service.")
    label: Optional[str] = Field(None, description="Display label of the service.")
    capabilities: List[str] = Field(
        default_factory=list, description="Capabilities the service advertises."
    )


class AccessInterface(BaseModel):
    """One concrete endpoint of a service as listed by the registry."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Address of the endpoint.")
    interface_type: InterfaceType = Field(
        ..., description="Protocol spoken at the endpoint."
    )

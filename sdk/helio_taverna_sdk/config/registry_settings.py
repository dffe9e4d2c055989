"""HELIO service registry settings."""

from typing import Any

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVICE_NAME = "taverna"
DEFAULT_INTERFACE_TYPE_NAME = "TAVERNA_SOAP"
DEFAULT_INTERFACE_TYPE_URI = "http://taverna/soap"


class RegistrySettings(BaseSettings):
    """Configuration for looking up Taverna Server endpoints in the registry."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    registry_url: HttpUrl = Field(
        default="http://registry.helio-vo.eu/registry",
        title="Registry URL",
        description="Base URL of the HELIO service registry.",
        alias="HELIO_REGISTRY_URL",
    )
    timeout_seconds: float = Field(
        default=30.0,
        title="Registry Timeout",
        description="Timeout in seconds for registry lookups.",
        alias="HELIO_REGISTRY_TIMEOUT_SECONDS",
    )
    service_name: str = Field(
        default=DEFAULT_SERVICE_NAME,
        title="Service Name",
        description="Registry key under which Taverna Server is published.",
        alias="HELIO_TAVERNA_SERVICE_NAME",
    )
    interface_type_name: str = Field(
        default=DEFAULT_INTERFACE_TYPE_NAME,
        title="Interface Type Name",
        description="Name of the access interface type to select.",
        alias="HELIO_TAVERNA_INTERFACE_TYPE",
    )
    interface_type_uri: str = Field(
        default=DEFAULT_INTERFACE_TYPE_URI,
        title="Interface Type URI",
        description="URI identifying the access interface type to select.",
        alias="HELIO_TAVERNA_INTERFACE_URI",
    )
    use_mock_registry: bool = Field(
        default=False,
        title="Use Mock Registry",
        description="Return an in-memory registry client when enabled.",
        alias="HELIO_USE_MOCK_REGISTRY",
    )

    @field_validator("use_mock_registry", mode="before")
    @classmethod
    def parse_use_mock_registry(cls, value: Any) -> bool:
        """Ensure the mock toggle is parsed as a boolean from string."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)

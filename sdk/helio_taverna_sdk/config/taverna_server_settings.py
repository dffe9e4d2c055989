"""Taverna Server connection settings."""

from typing import Any

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TavernaServerSettings(BaseSettings):
    """Configuration for connections to a Taverna Server instance."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    default_address: HttpUrl = Field(
        default="http://localhost:8080/taverna-server/soap/",
        title="Default Service Address",
        description="Endpoint used when a connection is opened without an address.",
        alias="TAVERNA_SERVER_URL",
    )
    timeout_seconds: float = Field(
        default=60.0,
        title="Request Timeout",
        description="Timeout in seconds applied to each SOAP request.",
        alias="TAVERNA_SERVER_TIMEOUT_SECONDS",
    )
    use_mock_server: bool = Field(
        default=False,
        title="Use Mock Server",
        description="Return an in-memory run-service channel when enabled.",
        alias="TAVERNA_USE_MOCK_SERVER",
    )

    @field_validator("use_mock_server", mode="before")
    @classmethod
    def parse_use_mock_server(cls, value: Any) -> bool:
        """Ensure the mock toggle is parsed as a boolean from string."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)

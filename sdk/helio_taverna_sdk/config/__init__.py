"""Configuration module for the HELIO Taverna SDK."""

from .registry_settings import RegistrySettings
from .taverna_server_settings import TavernaServerSettings

__all__ = [
    "RegistrySettings",
    "TavernaServerSettings",
]

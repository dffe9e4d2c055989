"""Credential strategies attached to a Taverna Server connection."""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .protocol import (
    HTTP_REQUEST_HEADERS,
    PASSWORD_PROPERTY,
    SECURITY_TOKEN_HEADER,
    USERNAME_PROPERTY,
)

logger = logging.getLogger(__name__)

NULL_TOKEN_PLACEHOLDER = "<null>"


class NoCredentials(BaseModel):
    """Anonymous access; no identity is attached to remote calls."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"

    def transport_properties(self) -> Dict[str, Any]:
        return {}


class UsernamePassword(BaseModel):
    """HTTP identity made of a username and password."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["username_password"] = "username_password"
    username: str
    password: SecretStr

    def transport_properties(self) -> Dict[str, Any]:
        return {
            USERNAME_PROPERTY: self.username,
            PASSWORD_PROPERTY: self.password.get_secret_value(),
        }


class SecurityToken(BaseModel):
    """Opaque HELIO security token sent as a request header.

    The token is serialised with ``str()``. A missing token is sent as the
    literal ``"<null>"`` rather than being rejected or omitted, so callers
    must not rely on this path as an anonymous fallback.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["security_token"] = "security_token"
    token: Any = None

    def header_value(self) -> str:
        if self.token is None:
            return NULL_TOKEN_PLACEHOLDER
        return str(self.token)

    def transport_properties(self) -> Dict[str, Any]:
        logger.debug(
            "type of security token: "
            f"{NULL_TOKEN_PLACEHOLDER if self.token is None else type(self.token)}"
        )
        return {
            HTTP_REQUEST_HEADERS: {SECURITY_TOKEN_HEADER: [self.header_value()]},
        }


Credentials = Annotated[
    Union[NoCredentials, UsernamePassword, SecurityToken],
    Field(discriminator="kind"),
]

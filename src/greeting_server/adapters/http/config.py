"""Server configuration model and loader.

Provides the ServerConfig Pydantic model for validated, immutable listener
settings and the loader that builds it from the ``[server]`` section of the
layered configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from greeting_server.domain.behaviors import CANONICAL_GREETING

#: Listen on all interfaces.
DEFAULT_HOST: Final[str] = ""
#: Fixed port of the original service.
DEFAULT_PORT: Final[int] = 8080


class ServerConfig(BaseModel):
    """Validated, immutable listener configuration.

    Example:
        >>> config = ServerConfig(port=9000)
        >>> config.port, config.host, config.greeting
        (9000, '', 'Hello, world.')
    """

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    greeting: str = CANONICAL_GREETING

    @field_validator("host", mode="before")
    @classmethod
    def _coerce_missing_host(cls, v: Any) -> Any:
        """Treat ``None`` and whitespace-only hosts as "all interfaces".

        Examples:
            >>> ServerConfig._coerce_missing_host(None)
            ''
            >>> ServerConfig._coerce_missing_host("  127.0.0.1 ")
            '127.0.0.1'
        """
        if v is None:
            return DEFAULT_HOST
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("greeting")
    @classmethod
    def _require_greeting(cls, v: str) -> str:
        if not v:
            raise ValueError("greeting must not be empty")
        return v


def load_server_config_from_dict(config_dict: Mapping[str, Any]) -> ServerConfig:
    """Load ServerConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    ServerConfig model. Missing keys fall back to the model defaults.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a ``server`` section.

    Returns:
        Validated server settings.

    Raises:
        pydantic.ValidationError: When the section holds invalid values.

    Example:
        >>> load_server_config_from_dict({"server": {"port": "9000"}}).port
        9000
        >>> load_server_config_from_dict({}).port
        8080
    """
    server_section: Any = config_dict.get("server", {})

    if not isinstance(server_section, Mapping):
        return ServerConfig.model_validate(server_section)

    server_raw: dict[str, Any] = dict(cast(Mapping[str, Any], server_section))
    return ServerConfig.model_validate(server_raw)


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ServerConfig",
    "load_server_config_from_dict",
]

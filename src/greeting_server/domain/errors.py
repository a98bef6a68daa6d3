"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[server]`` section holds values the server cannot start
    with (port out of range, empty greeting). Caught at the CLI boundary and
    reported with the CONFIG_ERROR exit code.

    Example:
        >>> from greeting_server.domain.errors import ConfigurationError
        >>> err = ConfigurationError("server.port must be between 0 and 65535")
        >>> str(err)
        'server.port must be between 0 and 65535'
    """


class BindError(Exception):
    """The listening socket could not be acquired.

    Raised at start-up when the port is already in use, the process lacks
    permission to bind it, or the host cannot be resolved. Fatal: the server
    never retries.

    Attributes:
        host: Interface the bind was attempted on (empty string = all).
        port: Requested TCP port.
        reason: Operating system description of the failure.
        errno: Operating system error number, when one was reported.

    Example:
        >>> from greeting_server.domain.errors import BindError
        >>> err = BindError("", 8080, "Address already in use", errno=98)
        >>> str(err)
        'Cannot bind 0.0.0.0:8080: Address already in use'
        >>> err.port, err.errno
        (8080, 98)
    """

    def __init__(self, host: str, port: int, reason: str, *, errno: int | None = None) -> None:
        super().__init__(f"Cannot bind {host or '0.0.0.0'}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason
        self.errno = errno


__all__ = [
    "BindError",
    "ConfigurationError",
]

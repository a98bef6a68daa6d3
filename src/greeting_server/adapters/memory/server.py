"""In-memory server adapter for testing.

Contents:
    * :class:`ServerSpy` - Records start requests instead of binding a socket.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...domain.behaviors import CANONICAL_GREETING
from ..http.config import DEFAULT_HOST, DEFAULT_PORT


def _empty_start_list() -> list[dict[str, Any]]:
    return []


@dataclass
class ServerSpy:
    """Captures start_server calls for test assertions.

    ``start_server`` returns immediately instead of blocking, so CLI paths
    that would serve forever can run inside a test.

    Attributes:
        started: Keyword arguments of every start_server call, in order.
        raise_exception: When set, start_server raises it (e.g. a BindError).

    Example:
        >>> spy = ServerSpy()
        >>> spy.start_server(port=9000)
        >>> spy.started
        [{'port': 9000, 'host': '', 'greeting': 'Hello, world.'}]
    """

    started: list[dict[str, Any]] = field(default_factory=_empty_start_list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.started.clear()
        self.raise_exception = None

    def start_server(
        self,
        *,
        port: int = DEFAULT_PORT,
        host: str = DEFAULT_HOST,
        greeting: str = CANONICAL_GREETING,
    ) -> None:
        """Record the request; raise ``raise_exception`` when configured."""
        if self.raise_exception is not None:
            raise self.raise_exception
        self.started.append({"port": port, "host": host, "greeting": greeting})


__all__ = ["ServerSpy"]

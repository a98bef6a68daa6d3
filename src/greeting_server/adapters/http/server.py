"""Threaded HTTP listener answering every request with the greeting.

Every request, whatever its path or method, receives the same prebuilt
200 response. Connections are serviced one thread each by
:class:`http.server.ThreadingHTTPServer`; nothing is shared between them
except the read-only response.

Contents:
    * :class:`GreetingHTTPServer` - Listener holding the prebuilt response.
    * :class:`GreetingRequestHandler` - Catch-all request handler.
    * :func:`create_server` - Bind the listener, translating failures to BindError.
    * :func:`serve` - Block serving requests on a bound listener.
    * :func:`start_server` - Bind and serve in one call.
"""

from __future__ import annotations

import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from greeting_server.domain.behaviors import CANONICAL_GREETING, GreetingResponse, build_response
from greeting_server.domain.errors import BindError

from .config import DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

_READ_CHUNK = 64 * 1024
_MAX_LINE = 65537


class GreetingRequestHandler(BaseHTTPRequestHandler):
    """Write the server's greeting response for any method and path.

    ``http.server`` dispatches a request to ``do_<METHOD>``; every such
    lookup resolves to the same responder, so unknown method tokens are
    answered too instead of getting a 501.
    """

    protocol_version = "HTTP/1.1"
    server: GreetingHTTPServer

    def __getattr__(self, name: str) -> Any:
        if name.startswith("do_"):
            return self._respond
        raise AttributeError(name)

    def do_HEAD(self) -> None:
        self._write_response(include_body=False)

    def _respond(self) -> None:
        self._write_response(include_body=True)

    def _write_response(self, *, include_body: bool) -> None:
        keep_alive = self._discard_body()
        response = self.server.response
        self.send_response(response.status)
        self.send_header("Content-Type", response.content_type)
        self.send_header("Content-Length", str(len(response.body)))
        if not keep_alive:
            self.send_header("Connection", "close")
        self.end_headers()
        if include_body:
            self.wfile.write(response.body)

    def _discard_body(self) -> bool:
        """Read and drop the request body.

        Returns:
            False when the body could not be delimited and the connection
            has to close after the response.
        """
        codings = self._transfer_codings()
        if codings:
            # Only a final chunked coding delimits the body; Content-Length is ignored.
            return codings[-1] == "chunked" and self._discard_chunked_body()
        raw_length = self.headers.get("Content-Length")
        if not raw_length:
            return True
        try:
            length = int(raw_length)
        except ValueError:
            return False
        if length < 0:
            return False
        return self._discard_exactly(length)

    def _transfer_codings(self) -> list[str]:
        """Transfer codings in the order they were applied, across repeated headers."""
        values = self.headers.get_all("Transfer-Encoding") or []
        return [coding.strip().lower() for value in values for coding in value.split(",") if coding.strip()]

    def _discard_chunked_body(self) -> bool:
        while True:
            size_line = self.rfile.readline(_MAX_LINE)
            if not size_line:
                return False
            try:
                size = int(size_line.split(b";", 1)[0].strip(), 16)
            except ValueError:
                return False
            if size == 0:
                break
            # chunk data is followed by CRLF
            if not self._discard_exactly(size + 2):
                return False
        while True:
            trailer = self.rfile.readline(_MAX_LINE)
            if not trailer:
                return False
            if trailer in (b"\r\n", b"\n"):
                return True

    def _discard_exactly(self, remaining: int) -> bool:
        while remaining > 0:
            chunk = self.rfile.read(min(remaining, _READ_CHUNK))
            if not chunk:
                return False
            remaining -= len(chunk)
        return True

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.debug("%s - " + format, self.address_string(), *args)

    def log_error(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.warning("%s - " + format, self.address_string(), *args)


class GreetingHTTPServer(ThreadingHTTPServer):
    """Thread-per-connection listener holding the prebuilt greeting response.

    Binding happens in the constructor; a failed bind closes the socket and
    re-raises the ``OSError``.
    """

    daemon_threads = True

    def __init__(self, server_address: tuple[str, int], response: GreetingResponse) -> None:
        self.response = response
        super().__init__(server_address, GreetingRequestHandler)

    @property
    def port(self) -> int:
        """Port actually bound, resolved when 0 was requested."""
        return int(self.server_address[1])


def create_server(
    *,
    port: int = DEFAULT_PORT,
    host: str = DEFAULT_HOST,
    greeting: str = CANONICAL_GREETING,
) -> GreetingHTTPServer:
    """Bind a listener that answers every request with *greeting*.

    Args:
        port: TCP port to bind; 0 lets the operating system choose.
        host: Interface to bind; empty string binds all interfaces.
        greeting: Text written as every response body.

    Returns:
        Bound listener, not yet serving.

    Raises:
        BindError: When the address is in use, permission is denied, or the
            host cannot be resolved.

    Example:
        >>> server = create_server(port=0, host="127.0.0.1")
        >>> server.port > 0
        True
        >>> server.server_close()
    """
    try:
        return GreetingHTTPServer((host, port), build_response(greeting))
    except OSError as exc:
        raise BindError(host, port, exc.strerror or str(exc), errno=exc.errno) from exc


def serve(server: GreetingHTTPServer) -> None:
    """Serve requests on *server* until the process stops.

    The listening socket is closed when serving ends, including on
    ``KeyboardInterrupt``.
    """
    logger.info("Server listening on port %d", server.port, extra={"host": server.server_address[0]})
    with server:
        server.serve_forever()


def start_server(
    *,
    port: int = DEFAULT_PORT,
    host: str = DEFAULT_HOST,
    greeting: str = CANONICAL_GREETING,
) -> None:
    """Bind a listener and block serving the greeting forever.

    Args:
        port: TCP port to bind; 0 lets the operating system choose.
        host: Interface to bind; empty string binds all interfaces.
        greeting: Text written as every response body.

    Raises:
        BindError: When the listener cannot be bound. Fatal, never retried.
    """
    serve(create_server(port=port, host=host, greeting=greeting))


__all__ = [
    "GreetingHTTPServer",
    "GreetingRequestHandler",
    "create_server",
    "serve",
    "start_server",
]

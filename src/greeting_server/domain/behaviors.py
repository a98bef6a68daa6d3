"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from dataclasses import dataclass

CANONICAL_GREETING = "Hello, world."
GREETING_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class GreetingResponse:
    """Response produced for every request, independent of path and method.

    Attributes:
        status: HTTP status code, always 200.
        body: UTF-8 encoded greeting.
        content_type: Media type announced in the ``Content-Type`` header.

    Example:
        >>> response = GreetingResponse(status=200, body=b"hi")
        >>> response.content_type
        'text/plain; charset=utf-8'
    """

    status: int
    body: bytes
    content_type: str = GREETING_CONTENT_TYPE


def build_greeting() -> str:
    """Return the canonical greeting string.

    The greeting is a process-wide constant; every response body the server
    writes is derived from it unless configuration replaces it at start-up.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello, world.'
    """
    return CANONICAL_GREETING


def build_response(greeting: str = CANONICAL_GREETING) -> GreetingResponse:
    """Return the response written for any request.

    Args:
        greeting: Text placed in the response body.

    Returns:
        A 200 response carrying the UTF-8 encoded greeting.

    Example:
        >>> response = build_response()
        >>> response.status, response.body
        (200, b'Hello, world.')
    """
    return GreetingResponse(status=200, body=greeting.encode("utf-8"))


__all__ = [
    "CANONICAL_GREETING",
    "GREETING_CONTENT_TYPE",
    "GreetingResponse",
    "build_greeting",
    "build_response",
]

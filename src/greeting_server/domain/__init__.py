"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting constant and the response built from it
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    GREETING_CONTENT_TYPE,
    GreetingResponse,
    build_greeting,
    build_response,
)
from .enums import OutputFormat
from .errors import BindError, ConfigurationError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "GREETING_CONTENT_TYPE",
    "GreetingResponse",
    "build_greeting",
    "build_response",
    # Enums
    "OutputFormat",
    # Errors
    "BindError",
    "ConfigurationError",
]

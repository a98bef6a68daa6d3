"""Public package surface exposing the greeting, the server, and configuration.

Routes imports through the architectural layers:
- Domain exports: greeting constant, response builder, error types
- Composition exports: wired adapter services (configuration, server start)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import create_server, get_config, start_server

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    build_response,
)
from .domain.errors import BindError

__all__ = [
    "BindError",
    "CANONICAL_GREETING",
    "build_greeting",
    "build_response",
    "create_server",
    "get_config",
    "print_info",
    "start_server",
]

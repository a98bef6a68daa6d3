"""HTTP adapter - catch-all greeting listener.

Contents:
    * :mod:`.config` - ServerConfig model and loader
    * :mod:`.server` - Threaded listener, request handler, start functions
"""

from __future__ import annotations

from .config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig, load_server_config_from_dict
from .server import GreetingHTTPServer, GreetingRequestHandler, create_server, serve, start_server

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "GreetingHTTPServer",
    "GreetingRequestHandler",
    "ServerConfig",
    "create_server",
    "load_server_config_from_dict",
    "serve",
    "start_server",
]

"""CLI command implementations.

Contents:
    * Serve command from :mod:`.serve_cmd`
    * Info and hello commands from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_hello, cli_info
from .serve_cmd import cli_serve

__all__ = [
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_serve",
]

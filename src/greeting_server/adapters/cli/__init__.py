"""CLI package providing the command-line interface.

Acts as the public facade for the CLI subsystem; consumers import from here
and stay insulated from internal module boundaries.
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_hello,
    cli_info,
    cli_serve,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import CLIContext, apply_traceback_preferences, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Traceback management
    "apply_traceback_preferences",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_serve",
]

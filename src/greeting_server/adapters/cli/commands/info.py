"""Informational CLI commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_hello` - Print the configured greeting without starting a server.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeting_server import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._server_config import resolve_server_config

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details.

    Example:
        >>> from click.testing import CliRunner
        >>> runner = CliRunner()
        >>> result = runner.invoke(cli_info)
        >>> result.exit_code == 0
        True
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_hello(ctx: click.Context) -> None:
    """Print the greeting the server would answer with."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        server_config = resolve_server_config(cli_ctx)
        logger.info("Executing hello command")
        click.echo(server_config.greeting)


__all__ = ["cli_hello", "cli_info"]

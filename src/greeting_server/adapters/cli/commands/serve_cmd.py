"""Serve CLI command.

Contents:
    * :func:`cli_serve` - Bind the listener and answer every request with the greeting.
"""

from __future__ import annotations

import errno
import logging

import lib_log_rich.runtime
import rich_click as click

from greeting_server.domain.errors import BindError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._server_config import resolve_server_config

logger = logging.getLogger(__name__)


def bind_error_exit_code(exc: BindError) -> ExitCode:
    """Map a BindError to the exit code reported by the CLI.

    Examples:
        >>> bind_error_exit_code(BindError("", 80, "Permission denied", errno=errno.EACCES))
        <ExitCode.PERMISSION_DENIED: 13>
        >>> bind_error_exit_code(BindError("", 8080, "Address already in use", errno=errno.EADDRINUSE))
        <ExitCode.ADDRESS_IN_USE: 98>
    """
    if exc.errno in (errno.EACCES, errno.EPERM):
        return ExitCode.PERMISSION_DENIED
    return ExitCode.ADDRESS_IN_USE


@click.command("serve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--host", default=None, help="Interface to bind (empty string = all interfaces)")
@click.option(
    "--port",
    type=click.IntRange(0, 65535),
    default=None,
    help="TCP port to listen on (0 = let the OS choose)",
)
@click.option("--greeting", default=None, help="Override the response body")
@click.pass_context
def cli_serve(ctx: click.Context, host: str | None, port: int | None, greeting: str | None) -> None:
    """Start the HTTP server and block until the process is stopped.

    Options override the ``[server]`` configuration section for this run.
    A port that cannot be bound ends the process immediately; there is no retry.
    """
    cli_ctx = get_cli_context(ctx)
    server_config = resolve_server_config(cli_ctx, host=host, port=port, greeting=greeting)

    extra = {"command": "serve", "host": server_config.host, "port": server_config.port}
    with lib_log_rich.runtime.bind(job_id="cli-serve", extra=extra):
        logger.info("Starting server", extra={"host": server_config.host, "port": server_config.port})
        try:
            cli_ctx.services.start_server(
                port=server_config.port,
                host=server_config.host,
                greeting=server_config.greeting,
            )
        except BindError as exc:
            logger.error(
                "Cannot bind listener",
                extra={"host": exc.host, "port": exc.port, "error": exc.reason, "errno": exc.errno},
            )
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(bind_error_exit_code(exc)) from exc


__all__ = ["bind_error_exit_code", "cli_serve"]

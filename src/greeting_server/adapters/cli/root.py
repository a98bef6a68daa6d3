"""Root CLI command group and global option handling.

Running the group without a subcommand starts the server, so a bare
``greeting-server`` behaves like the single-purpose program it wraps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greeting_server import __init__conf__
from greeting_server.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences

if TYPE_CHECKING:
    from greeting_server.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides to a Config, raising UsageError on failure."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. server.port=9000.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, initialise logging, and dispatch.

    Configuration is loaded once with the profile, ``--set`` overrides are
    applied, and the result is stored in the Click context for subcommands.
    Without a subcommand the server is started with the configured settings.
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    ctx.obj = CLIContext(
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
        traceback=traceback,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import cli_serve

        ctx.invoke(cli_serve, host=None, port=None, greeting=None)


# Commands import from package ancestors, so registration is deferred until
# the group exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_hello, cli_info, cli_serve

    for cmd in (cli_serve, cli_hello, cli_info, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]

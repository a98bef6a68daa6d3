"""Per-invocation CLI state shared by the root group and its commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from greeting_server.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from greeting_server.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group resolved before dispatching to a command.

    Attributes:
        config: Layered configuration with ``--set`` overrides applied.
        services: Application services from the composition layer.
        profile: Profile the configuration was loaded with.
        set_overrides: Raw ``--set`` strings, kept so a reload under another
            profile ends up with the same overrides.
        traceback: Whether ``--traceback`` was given.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    traceback: bool = False

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the configuration for *profile* and the profile it was read with.

        Without a profile, or with the one the root group already used, the
        stored configuration is returned as is.

        Raises:
            ValueError: If *profile* is not a valid profile name.
        """
        if not profile or profile == self.profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Find the CLIContext stored by the root group on *ctx* or a parent.

    Raises:
        RuntimeError: If no CLIContext was stored.
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError("CLI context not initialized. The root group stores it before dispatch.")
    return cli_ctx


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch lib_cli_exit_tools between full coloured tracebacks and summaries.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


__all__ = [
    "CLIContext",
    "apply_traceback_preferences",
    "get_cli_context",
]

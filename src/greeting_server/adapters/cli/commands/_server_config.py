"""Shared helpers for commands that need the ``[server]`` settings.

Internal module (underscore prefix).

Contents:
    * :func:`filter_sentinels` - Drop options the user did not pass.
    * :func:`resolve_server_config` - Validated ServerConfig or CONFIG_ERROR exit.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import rich_click as click
from pydantic import ValidationError

from greeting_server.adapters.http.config import ServerConfig
from greeting_server.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def filter_sentinels(**kwargs: Any) -> dict[str, Any]:
    """Return *kwargs* without the ``None`` values Click uses for unset options.

    Example:
        >>> filter_sentinels(host=None, port=9000, greeting="")
        {'port': 9000, 'greeting': ''}
    """
    return {key: value for key, value in kwargs.items() if value is not None}


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``server.<field>: <message>`` fragments."""
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"server.{location}: {error['msg']}" if location else f"server: {error['msg']}")
    return "; ".join(parts)


def _exit_with_config_error(exc: ConfigurationError) -> NoReturn:
    logger.error("Invalid server configuration", extra={"error": str(exc)})
    click.echo(f"\nError: Configuration error - {exc}", err=True)
    raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def resolve_server_config(cli_ctx: CLIContext, **overrides: Any) -> ServerConfig:
    """Build the effective ServerConfig from the loaded config and CLI options.

    Options left unset (``None``) keep the configured value. Every value,
    including overrides, passes through the model validators.

    Args:
        cli_ctx: CLI context holding the loaded configuration and services.
        **overrides: ``host``, ``port`` and ``greeting`` from the command line.

    Returns:
        Validated server settings.

    Raises:
        SystemExit: With CONFIG_ERROR (78) when validation fails.
    """
    try:
        server_config = cli_ctx.services.load_server_config_from_dict(cli_ctx.config.as_dict())
        provided = filter_sentinels(**overrides)
        if provided:
            server_config = ServerConfig.model_validate({**server_config.model_dump(), **provided})
    except ValidationError as exc:
        _exit_with_config_error(ConfigurationError(_describe_validation_error(exc)))
    return server_config


__all__ = [
    "filter_sentinels",
    "resolve_server_config",
]

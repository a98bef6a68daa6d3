"""Layered configuration for the greeting server, read once per profile."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from greeting_server import __init__conf__

DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")
"""Bundled defaults: the ``[server]`` listener settings and ``[lib_log_rich]``."""


def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return DEFAULT_CONFIG_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration over the bundled server defaults.

    Precedence, lowest first: defaults, app, host, user, dotenv, env. The
    result is cached per (profile, start_dir); ``get_config.cache_clear()``
    forces the next call to read from disk again.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Raises:
        ValueError: If *profile* is empty, too long, or escapes the
            configuration tree.

    Example:
        >>> get_config().get("server.port")
        8080
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return _read_layers(profile, start_dir)


get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "get_config",
    "get_default_config_path",
]

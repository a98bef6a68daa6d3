"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` (see ``tests/test_metadata_sync.py``)
so the console script, ``--version`` output, and configuration paths agree.

Contents:
    * Metadata constants (name, title, version, homepage, author, shell_command).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config for path resolution.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "greeting_server"
title = "Single-route HTTP server answering every request with a constant greeting"
version = "1.0.0"
homepage = "https://github.com/bitranox/greeting_server"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "greeting-server"

#: Vendor identifier (macOS/Windows configuration directories).
LAYEREDCONF_VENDOR: str = "bitranox"
#: Application identifier (macOS/Windows configuration directories).
LAYEREDCONF_APP: str = "Greeting Server"
#: Slug used for Linux XDG paths and the environment variable prefix.
LAYEREDCONF_SLUG: str = "greeting-server"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeting_server:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))

"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def path(self) -> tuple[str, ...]:
        """Section followed by the key path, e.g. ``("server", "port")``."""
        return (self.section, *self.key_path)


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or a path
            component is empty.

    Examples:
        >>> override = parse_override("server.port=9000")
        >>> override.section, override.key_path, override.value
        ('server', ('port',), 9000)

        >>> parse_override("server.greeting=Hi=there").value
        'Hi=there'
    """
    dotted, has_value, value = raw.partition("=")
    if not has_value:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, has_key, key = dotted.partition(".")
    if not has_key:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(key.split("."))
    if "" in key_path:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section, key_path, coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Read *raw* as JSON so ports and flags keep their types; other text stays a string.

    Examples:
        >>> coerce_value("8080")
        8080
        >>> coerce_value("false")
        False
        >>> coerce_value("Hello, world.")
        'Hello, world.'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return cast(CoercedValue, orjson.loads(raw))
    except ValueError:
        # orjson.JSONDecodeError is a ValueError
        return raw


def _assign(tree: dict[str, object], path: tuple[str, ...], value: CoercedValue) -> None:
    """Set *value* at *path* inside *tree*, creating the tables in between.

    Raises:
        TypeError: If part of *path* already holds a value that is not a table.
    """
    *tables, leaf = path
    node = tree
    for name in tables:
        child = node.setdefault(name, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {name!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into *config*.

    Args:
        config: Configuration loaded from file and environment layers.
        raw_overrides: ``SECTION.KEY=VALUE`` strings in command-line order;
            later entries win.

    Returns:
        New Config with the overrides merged, or *config* itself when there
        are none.

    Raises:
        ValueError: If any override string is malformed.
        TypeError: If one override nests below a scalar set by another.

    Examples:
        >>> cfg = Config({"server": {"port": 8080, "host": ""}}, {})
        >>> merged = apply_overrides(cfg, ("server.port=9000",))
        >>> merged["server"]["port"], merged["server"]["host"]
        (9000, '')
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: dict[str, object] = {}
    for override in map(parse_override, raw_overrides):
        _assign(tree, override.path, override.value)
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]

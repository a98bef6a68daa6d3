"""Package metadata, PEP 561 marker and bundled-defaults packaging tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    """Return ``[tool.hatch.build.targets.wheel]`` or an empty table."""
    table: Any = _load_pyproject()
    for key in ("tool", "hatch", "build", "targets", "wheel"):
        table = cast(dict[str, Any], table).get(key, {})
    return cast(dict[str, Any], table)


def _get_package_dir() -> Path:
    """Locate the package directory from the wheel ``packages`` list."""
    for package_entry in cast(list[Any], _wheel_table().get("packages", [])):
        if isinstance(package_entry, str) and (PROJECT_ROOT / package_entry).is_dir():
            return PROJECT_ROOT / package_entry
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify print_info outputs package metadata."""
    from greeting_server import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for greeting_server:" in captured
    assert "shell_command" in captured
    assert "greeting-server" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    """Static metadata names the package and its console script."""
    from greeting_server import __init__conf__

    assert __init__conf__.name == "greeting_server"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "greeting-server"


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    """The console script is wired to greeting_server.entry:main."""
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])

    assert scripts == {"greeting-server": "greeting_server.entry:main"}


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """Verify PEP 561 py.typed marker exists in the package source."""
    py_typed = _get_package_dir() / "py.typed"
    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("marker", ["py.typed", "defaultconfig.toml"])
def test_data_files_are_included_in_wheel_config(marker: str) -> None:
    """Non-Python files the package needs at runtime ship in the wheel."""
    includes = cast(list[str], _wheel_table().get("include", []))
    assert any(marker in entry for entry in includes), f"{marker} must be in wheel build includes"


@pytest.mark.os_agnostic
def test_bundled_defaults_listen_on_port_8080() -> None:
    """defaultconfig.toml serves the canonical greeting on 8080."""
    defaults = rtoml.load(_get_package_dir() / "adapters" / "config" / "defaultconfig.toml")

    assert defaults["server"] == {"host": "", "port": 8080, "greeting": "Hello, world."}

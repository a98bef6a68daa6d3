"""Shared pytest fixtures for CLI, module-entry and HTTP tests.

All shared fixtures live here and are discovered implicitly by pytest.
Fixture names read as plain English at the call site.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeting_server.adapters.http.server import GreetingHTTPServer
    from greeting_server.adapters.memory.server import ServerSpy
    from greeting_server.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output; log lines go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for commands that never serve."""
    from greeting_server.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before the test: a monkeypatched get_config has no cache_clear.
    """
    from greeting_server.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_port(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"server": {"port": 9000}})
            assert config.get("server.port") == 9000
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class ServerCliContext:
    """Services factory bundled with the spy that records start requests.

    Attributes:
        factory: Callable returning wired AppServices for ``cli_runner.invoke(obj=...)``.
        spy: ServerSpy standing in for the real listener.
    """

    factory: Callable[[], Any]
    spy: ServerSpy


@pytest.fixture
def server_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], ServerCliContext]:
    """Create CLI test context with injected config and a ServerSpy.

    Only the I/O boundaries are replaced: ``get_config`` returns the given
    data and ``start_server`` records instead of binding. Logging and the
    ServerConfig loader stay production.

    Example:
        def test_serve(cli_runner: CliRunner, server_cli_context) -> None:
            ctx = server_cli_context({"server": {"port": 9000}})
            cli_runner.invoke(cli, ["serve"], obj=ctx.factory)
            assert ctx.spy.started[0]["port"] == 9000
    """
    from greeting_server.adapters.memory.server import ServerSpy as ServerSpyImpl
    from greeting_server.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> ServerCliContext:
        spy = ServerSpyImpl()
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_server_config_from_dict=prod.load_server_config_from_dict,
            start_server=spy.start_server,
            init_logging=prod.init_logging,
        )
        return ServerCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def inject_test_services() -> Callable[[], Callable[..., AppServices]]:
    """Return the build_testing factory for full in-memory testing."""
    from greeting_server.composition import build_testing

    def _inject() -> Callable[..., AppServices]:
        return build_testing

    return _inject


@pytest.fixture
def running_server() -> Iterator[GreetingHTTPServer]:
    """Serve the default greeting on an ephemeral loopback port.

    The listener runs in a background thread and is shut down after the test.

    Example:
        def test_root(running_server: GreetingHTTPServer) -> None:
            response = httpx.get(f"http://127.0.0.1:{running_server.port}/")
    """
    from greeting_server.adapters.http.server import create_server

    server = create_server(port=0, host="127.0.0.1")
    thread = threading.Thread(target=server.serve_forever, name="greeting-server-test", daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)

"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# HTTP services
from ..adapters.http.config import load_server_config_from_dict
from ..adapters.http.server import create_server, start_server

# Logging services
from ..adapters.logging.setup import init_logging

# pyright checks each adapter against its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.server import ServerSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadServerConfigFromDict,
        StartServer,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_server_config_from_dict: LoadServerConfigFromDict = load_server_config_from_dict
    _assert_start_server: StartServer = start_server
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_server_config_from_dict: LoadServerConfigFromDict
    start_server: StartServer
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_server_config_from_dict=load_server_config_from_dict,
        start_server=start_server,
        init_logging=init_logging,
    )


def build_testing(*, spy: ServerSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: ServerSpy to record start requests on. A fresh one is created
            when None; pass your own to assert on what would have been served.

    Returns:
        AppServices container that never opens a socket or touches the filesystem.
    """
    from ..adapters.memory import (
        ServerSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    server_spy = spy if spy is not None else ServerSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_server_config_from_dict=load_server_config_from_dict,
        start_server=server_spy.start_server,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # HTTP
    "create_server",
    "load_server_config_from_dict",
    "start_server",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]

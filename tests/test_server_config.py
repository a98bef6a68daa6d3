"""ServerConfig stories: defaults, coercion and rejection of bad values."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from greeting_server.adapters.http.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ServerConfig,
    load_server_config_from_dict,
)


@pytest.mark.os_agnostic
def test_missing_section_uses_defaults() -> None:
    """Without a [server] section the listener binds all interfaces on 8080."""
    config = load_server_config_from_dict({})

    assert config.host == DEFAULT_HOST == ""
    assert config.port == DEFAULT_PORT == 8080
    assert config.greeting == "Hello, world."


@pytest.mark.os_agnostic
def test_section_values_replace_defaults() -> None:
    """Every key of the [server] section reaches the model."""
    config = load_server_config_from_dict(
        {"server": {"host": "127.0.0.1", "port": 9000, "greeting": "Hi."}},
    )

    assert config == ServerConfig(host="127.0.0.1", port=9000, greeting="Hi.")


@pytest.mark.os_agnostic
def test_port_from_environment_string_is_coerced() -> None:
    """Environment layers deliver strings; digits become an int port."""
    assert load_server_config_from_dict({"server": {"port": "9000"}}).port == 9000


@pytest.mark.os_agnostic
def test_port_zero_is_accepted_for_ephemeral_binding() -> None:
    """Port 0 asks the operating system for a free port."""
    assert load_server_config_from_dict({"server": {"port": 0}}).port == 0


@pytest.mark.os_agnostic
@pytest.mark.parametrize("port", [-1, 65536, 70000])
def test_port_outside_tcp_range_is_rejected(port: int) -> None:
    """Ports beyond 0..65535 fail validation."""
    with pytest.raises(ValidationError):
        load_server_config_from_dict({"server": {"port": port}})


@pytest.mark.os_agnostic
def test_non_numeric_port_is_rejected() -> None:
    """A port that is not a number fails validation."""
    with pytest.raises(ValidationError):
        load_server_config_from_dict({"server": {"port": "http"}})


@pytest.mark.os_agnostic
def test_empty_greeting_is_rejected() -> None:
    """An empty greeting would produce an empty body and is refused."""
    with pytest.raises(ValidationError, match="greeting must not be empty"):
        load_server_config_from_dict({"server": {"greeting": ""}})


@pytest.mark.os_agnostic
def test_host_whitespace_is_stripped() -> None:
    """Surrounding whitespace around the host is dropped."""
    assert load_server_config_from_dict({"server": {"host": "  localhost "}}).host == "localhost"


@pytest.mark.os_agnostic
def test_null_host_means_all_interfaces() -> None:
    """A null host falls back to the wildcard interface."""
    assert load_server_config_from_dict({"server": {"host": None}}).host == ""


@pytest.mark.os_agnostic
def test_server_section_that_is_not_a_table_is_rejected() -> None:
    """A scalar [server] value fails validation instead of being ignored."""
    with pytest.raises(ValidationError):
        load_server_config_from_dict({"server": "8080"})


@pytest.mark.os_agnostic
def test_server_config_is_frozen() -> None:
    """Validated settings cannot be changed after loading."""
    config = ServerConfig()

    with pytest.raises(ValidationError):
        config.port = 9000  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_unknown_keys_are_ignored() -> None:
    """Keys the listener does not know are dropped silently."""
    config = load_server_config_from_dict({"server": {"port": 8081, "workers": 4}})

    assert config.port == 8081
    assert not hasattr(config, "workers")

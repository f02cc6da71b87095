"""
Tests for ServerConfig construction from command-line options and environment.
"""
import dataclasses

import pytest

from self_mcp.cli import Directive, parse_arguments
from self_mcp.config import ServerConfig, TransportType
from self_mcp.constants import DEFAULT_TOOL_DESCRIPTION, SERVER_NAME, SERVER_VERSION
from self_mcp.errors import ConfigurationError


@pytest.fixture
def options():
    return parse_arguments(["--required", "depth"])


def test_defaults(options):
    config = ServerConfig.from_options(options, environ={})

    assert config.server_name == SERVER_NAME
    assert config.server_version == SERVER_VERSION
    assert config.tool_name == "Self"
    assert config.tool_description == DEFAULT_TOOL_DESCRIPTION
    assert config.tool_description_source is None
    assert config.transport == TransportType.STDIO.value
    assert config.log_level == "INFO"
    assert config.required_names == ["prompt", "depth"]


def test_description_override_carried():
    options = parse_arguments(["--tool-description", "Custom"])
    config = ServerConfig.from_options(options, environ={})

    assert config.tool_description == "Custom"
    assert config.tool_description_source is Directive.TOOL_DESCRIPTION


def test_config_is_frozen(options):
    config = ServerConfig.from_options(options, environ={})

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.tool_description = "changed"
    assert isinstance(config.parameters, tuple)


@pytest.mark.parametrize(
    "environ, level",
    [
        ({"SELF_MCP_LOG_LEVEL": "warning"}, "WARNING"),
        ({"DEBUG": "true"}, "DEBUG"),
        ({"DEBUG": "TRUE", "SELF_MCP_LOG_LEVEL": "ERROR"}, "DEBUG"),
        ({"DEBUG": "false"}, "INFO"),
    ],
)
def test_log_level_from_env(options, environ, level):
    assert ServerConfig.from_options(options, environ=environ).log_level == level


def test_invalid_log_level_fails(options):
    with pytest.raises(ConfigurationError, match="Invalid SELF_MCP_LOG_LEVEL 'LOUD'"):
        ServerConfig.from_options(options, environ={"SELF_MCP_LOG_LEVEL": "loud"})


def test_server_name_from_env(options):
    config = ServerConfig.from_options(options, environ={"SELF_MCP_SERVER_NAME": "mirror"})
    assert config.server_name == "mirror"


def test_blank_server_name_fails(options):
    with pytest.raises(ConfigurationError, match="cannot be empty"):
        ServerConfig.from_options(options, environ={"SELF_MCP_SERVER_NAME": "  "})

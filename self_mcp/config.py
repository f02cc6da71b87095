"""Configuration management combining command-line options with environment variables.

This module provides the ServerConfig dataclass: an immutable value built once
at startup and passed to everything that builds schemas or handles requests.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from typing_extensions import TypedDict

from .constants import (
    DEFAULT_PARAMETERS,
    DEFAULT_TOOL_DESCRIPTION,
    LOG_LEVELS,
    SERVER_NAME,
    SERVER_VERSION,
    TOOL_NAME,
)
from .errors import ConfigurationError

if TYPE_CHECKING:
    from .cli import CliOptions, Directive
    from .parameters import Parameters

__all__ = [
    "ServerConfig",
    "TransportType",
    "ToolSchema",
    "log_level_from_env",
]


def log_level_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Resolve the loguru level from SELF_MCP_LOG_LEVEL and DEBUG."""
    environ = os.environ if environ is None else environ

    log_level = environ.get("SELF_MCP_LOG_LEVEL", "INFO").strip().upper()
    if environ.get("DEBUG", "false").lower() == "true":
        log_level = "DEBUG"
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid SELF_MCP_LOG_LEVEL '{log_level}'",
            f"Valid levels: {', '.join(LOG_LEVELS)}",
        )
    return log_level


class TransportType(str, Enum):
    """Supported MCP transport types."""

    STDIO = "stdio"


class ToolSchema(TypedDict):
    """Type definition for the advertised tool."""

    name: str
    description: str
    inputSchema: dict[str, Any]


@dataclass(frozen=True)
class ServerConfig:
    """Frozen server configuration; never mutated after startup."""

    parameters: Parameters = DEFAULT_PARAMETERS
    tool_name: str = TOOL_NAME
    tool_description: str = DEFAULT_TOOL_DESCRIPTION
    tool_description_source: Directive | None = None
    server_name: str = SERVER_NAME
    server_version: str = SERVER_VERSION
    transport: str = TransportType.STDIO.value
    log_level: str = "INFO"

    @property
    def required_names(self) -> list[str]:
        return [parameter.name for parameter in self.parameters if parameter.required]

    @classmethod
    def from_options(
        cls, options: CliOptions, environ: Mapping[str, str] | None = None
    ) -> ServerConfig:
        """Merge parsed command-line options with environment variables.

        Recognized variables:
        - SELF_MCP_SERVER_NAME: name reported during initialization
        - SELF_MCP_LOG_LEVEL: loguru level for stderr logging (default INFO)
        - DEBUG: "true" forces DEBUG level
        """
        environ = os.environ if environ is None else environ
        log_level = log_level_from_env(environ)

        server_name = environ.get("SELF_MCP_SERVER_NAME", SERVER_NAME).strip()
        if not server_name:
            raise ConfigurationError("SELF_MCP_SERVER_NAME cannot be empty")

        return cls(
            parameters=options.parameters,
            tool_description=options.tool_description or DEFAULT_TOOL_DESCRIPTION,
            tool_description_source=options.tool_description_source,
            server_name=server_name,
            log_level=log_level,
        )

"""Self-MCP - Metacognitive self-prompting over the Model Context Protocol.

Self-MCP is an MCP server exposing a single tool, ``Self``, that does nothing
but acknowledge. Calling it lets a model explicitly re-steer its cognitive mode
across interleaved thinking turns. It provides:

- Command-line control over which tool parameters are required
- Custom parameters added from ``name:type:description[:required]`` specs
- An overridable tool description, inline or read from a file

Key Components:
    parse_arguments: Command-line directives into the final parameter set
    ServerConfig: Immutable configuration passed to the server
    build_input_schema: JSON Schema generation for the tools/list response
    create_server: MCP server wiring for the Self tool

Example:
    >>> from self_mcp import ServerConfig, parse_arguments
    >>> config = ServerConfig.from_options(parse_arguments(["--all-optional"]))

Architecture:
    argv → parameter definitions → ServerConfig → JSON Schema → MCP tools/list
"""

from __future__ import annotations

from .cli import CliOptions, parse_arguments
from .config import ServerConfig
from .constants import SERVER_VERSION
from .errors import ConfigurationError, HelpRequested, UnknownToolError
from .schema import build_input_schema
from .server import create_server

__version__ = SERVER_VERSION
__all__ = [
    "CliOptions",
    "ConfigurationError",
    "HelpRequested",
    "ServerConfig",
    "UnknownToolError",
    "build_input_schema",
    "create_server",
    "parse_arguments",
]

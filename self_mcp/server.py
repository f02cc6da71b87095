"""Self MCP Server"""

from __future__ import annotations

from typing import Any

import mcp.server.stdio
import mcp.types as types
from loguru import logger
from mcp.server.lowlevel import Server
from mcp.server.models import InitializationOptions

from .config import ServerConfig
from .errors import UnknownToolError
from .schema import build_tool_schema

__all__ = ["create_server", "handle_tool_call", "run_server"]


def handle_tool_call(
    name: str, arguments: Any, config: ServerConfig
) -> list[types.TextContent]:
    """Acknowledge a call to the Self tool with an empty text result.

    The arguments are never inspected: the cognitive shift happens through the
    call itself, not through its response.
    """
    if name != config.tool_name:
        raise UnknownToolError(name)
    return [types.TextContent(type="text", text="")]


def create_server(config: ServerConfig) -> Server:
    """Build the MCP server exposing the configured tool."""
    mcp_server = Server(config.server_name)

    @mcp_server.list_tools()
    async def list_tools() -> list[types.Tool]:
        """Return the single Self tool."""
        tool_schema = build_tool_schema(config)
        return [
            types.Tool(
                name=tool_schema["name"],
                description=tool_schema["description"],
                inputSchema=tool_schema["inputSchema"],
            )
        ]

    @mcp_server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> list[types.TextContent]:
        """Route the call; unknown names surface as an error result."""
        logger.debug(f"Tool call: {name}")
        return handle_tool_call(name, arguments, config)

    return mcp_server


async def run_server(config: ServerConfig) -> None:
    """Serve the configured tool over stdio until the client disconnects."""
    mcp_server = create_server(config)
    init_options = InitializationOptions(
        server_name=config.server_name,
        server_version=config.server_version,
        capabilities=types.ServerCapabilities(tools=types.ToolsCapability()),
    )

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("Self-MCP server running on stdio")
        await mcp_server.run(read_stream, write_stream, init_options)

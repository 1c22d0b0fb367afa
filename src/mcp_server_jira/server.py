"""MCP server wiring: exposes the tool dispatcher over the low-level MCP server."""

from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from mcp_server_jira.lifespan import jira_client_lifespan
from mcp_server_jira.settings import JiraSettings
from mcp_server_jira.tools.dispatcher import ToolDispatcher

logger = logging.getLogger("mcp_server_jira")

SERVER_NAME = "secure-jira-server"
SERVER_VERSION = "0.1.0"


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Build an MCP server whose tools are served by ``dispatcher``."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    # Argument checking happens in the dispatcher so the error text is ours.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await dispatcher.call_tool(name, arguments)

    return server


async def serve(settings: JiraSettings) -> None:
    """Run the server on stdio until the client disconnects."""
    async with jira_client_lifespan(settings) as client:
        server = create_server(ToolDispatcher(client))
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Secure MCP Jira Server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )

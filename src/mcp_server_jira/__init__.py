"""Jira MCP server exposing a single get-issue tool."""

from mcp_server_jira.jira.client import JiraClient
from mcp_server_jira.server import create_server, serve
from mcp_server_jira.settings import JiraClientConfig, JiraSettings
from mcp_server_jira.tools.dispatcher import ToolDispatcher

__all__ = [
    "JiraClient",
    "JiraClientConfig",
    "JiraSettings",
    "ToolDispatcher",
    "create_server",
    "serve",
]

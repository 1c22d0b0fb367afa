"""The static tool catalog served by this process."""

from mcp_server_jira.tools.issues import JIRA_GET_ISSUE
from mcp_server_jira.tools.registry import ToolDefinition

DEFAULT_TOOLS: tuple[ToolDefinition, ...] = (JIRA_GET_ISSUE,)

from mcp_server_jira.tools.catalog import DEFAULT_TOOLS
from mcp_server_jira.tools.dispatcher import ToolDispatcher
from mcp_server_jira.tools.issues import JIRA_GET_ISSUE, JiraGetIssueArgs, get_issue
from mcp_server_jira.tools.registry import ToolDefinition

__all__ = [
    "DEFAULT_TOOLS",
    "JIRA_GET_ISSUE",
    "JiraGetIssueArgs",
    "ToolDefinition",
    "ToolDispatcher",
    "get_issue",
]

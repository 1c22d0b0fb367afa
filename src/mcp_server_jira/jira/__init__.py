from mcp_server_jira.jira.client import JiraClient
from mcp_server_jira.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraValidationError,
)

__all__ = [
    "JiraClient",
    "JiraAPIError",
    "JiraAuthenticationError",
    "JiraNotFoundError",
    "JiraPermissionError",
    "JiraValidationError",
]

"""Issue tools: look up a single issue by key."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.json_schema import SkipJsonSchema

from mcp_server_jira.jira.client import JiraClient
from mcp_server_jira.tools.registry import ToolDefinition


class JiraGetIssueArgs(BaseModel):
    """Arguments for the jira_get_issue tool."""

    issue_key: str = Field(min_length=1, description="Jira issue key (e.g., 'PROJ-123')")
    expand: str | SkipJsonSchema[None] = Field(
        default=None, description="Optional fields to expand"
    )


async def get_issue(client: JiraClient, args: JiraGetIssueArgs) -> Any:
    """Fetch the raw issue document from Jira.

    ``expand`` is passed through untouched (e.g. "changelog,renderedFields").
    """
    return await client.find_issue(args.issue_key, args.expand)


JIRA_GET_ISSUE = ToolDefinition(
    name="jira_get_issue",
    description="Get details of a specific Jira issue.",
    arg_model=JiraGetIssueArgs,
    handler=get_issue,
)

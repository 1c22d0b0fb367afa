"""Tool definitions: name, schema and handler for each entry in the catalog."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from mcp import types
from pydantic import BaseModel

from mcp_server_jira.jira.client import JiraClient

ToolHandler = Callable[[JiraClient, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A catalog entry combining schema + handler.

    ``arg_model`` is used both to validate incoming arguments and to render
    the JSON schema advertised to clients, so the two can never drift apart.
    """

    name: str
    description: str
    arg_model: type[BaseModel]
    handler: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        return self.arg_model.model_json_schema()

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )

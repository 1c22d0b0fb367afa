"""Tool dispatcher: the single boundary between MCP requests and Jira calls."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Iterable
from typing import Any

from mcp import types
from pydantic import ValidationError

from mcp_server_jira.errors import ToolArgumentError, UnknownToolError
from mcp_server_jira.jira.client import JiraClient
from mcp_server_jira.tools.catalog import DEFAULT_TOOLS
from mcp_server_jira.tools.registry import ToolDefinition

logger = logging.getLogger("mcp_server_jira")


def _text_result(text: str, is_error: bool) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def _error_message(exc: BaseException) -> str:
    return str(exc) or repr(exc)


class ToolDispatcher:
    """Serves a fixed catalog of tools against one shared JiraClient.

    ``call_tool`` never raises: unknown tools, bad arguments and Jira or
    network failures all come back as an error-flagged ``CallToolResult``
    so the transport always has a well-formed response to send.
    """

    def __init__(self, client: JiraClient, tools: Iterable[ToolDefinition] = DEFAULT_TOOLS):
        self._client = client
        self._tools: dict[str, ToolDefinition] = {tool.name: tool for tool in tools}

    def list_tools(self) -> list[types.Tool]:
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        start = time.monotonic()
        try:
            payload = await self._dispatch(name, arguments)
            text = json.dumps(payload, indent=2, ensure_ascii=False)
        except Exception as e:
            message = _error_message(e)
            logger.warning("Tool %s failed after %.3fs: %s", name, time.monotonic() - start, message)
            return _text_result(f"Error: {message}", is_error=True)

        logger.info("Tool %s completed in %.3fs", name, time.monotonic() - start)
        return _text_result(text, is_error=False)

    async def _dispatch(self, name: str, arguments: dict[str, Any] | None) -> Any:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)

        try:
            args = tool.arg_model.model_validate(arguments if arguments is not None else {})
        except ValidationError as e:
            raise ToolArgumentError(name, str(e)) from e

        logger.debug("Calling %s with %s", name, args.model_dump(exclude_none=True))
        return await tool.handler(self._client, args)

"""Tests for the tool dispatcher using a mocked JiraClient."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from mcp_server_jira.jira.errors import JiraNotFoundError
from mcp_server_jira.tools import DEFAULT_TOOLS, JIRA_GET_ISSUE, ToolDispatcher


@pytest.fixture
def mock_client():
    return AsyncMock()


@pytest.fixture
def dispatcher(mock_client):
    return ToolDispatcher(mock_client)


def _text(result):
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


class TestListTools:
    def test_single_get_issue_tool(self, dispatcher):
        tools = dispatcher.list_tools()
        assert [t.name for t in tools] == ["jira_get_issue"]
        assert tools[0].description == "Get details of a specific Jira issue."

    def test_input_schema(self, dispatcher):
        schema = dispatcher.list_tools()[0].inputSchema
        assert schema["type"] == "object"
        assert schema["required"] == ["issue_key"]
        assert schema["properties"]["issue_key"]["type"] == "string"
        assert schema["properties"]["expand"]["type"] == "string"

    @pytest.mark.asyncio
    async def test_catalog_unchanged_by_calls(self, dispatcher, mock_client):
        before = dispatcher.list_tools()
        mock_client.find_issue.return_value = {"id": "1"}
        await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-1"})
        await dispatcher.call_tool("nonexistent_tool", {})
        assert dispatcher.list_tools() == before

    def test_default_catalog(self):
        assert DEFAULT_TOOLS == (JIRA_GET_ISSUE,)


class TestCallTool:
    @pytest.mark.asyncio
    async def test_success_returns_indented_json(self, dispatcher, mock_client):
        mock_client.find_issue.return_value = {"id": "123"}

        result = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-123"})

        assert result.isError is False
        assert _text(result) == json.dumps({"id": "123"}, indent=2)
        mock_client.find_issue.assert_awaited_once_with("PROJ-123", None)

    @pytest.mark.asyncio
    async def test_expand_is_forwarded(self, dispatcher, mock_client):
        mock_client.find_issue.return_value = {"id": "123"}

        await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-123", "expand": "changelog"})

        mock_client.find_issue.assert_awaited_once_with("PROJ-123", "changelog")

    @pytest.mark.asyncio
    async def test_non_ascii_is_kept(self, dispatcher, mock_client):
        mock_client.find_issue.return_value = {"summary": "Überprüfung"}
        result = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-1"})
        assert "Überprüfung" in _text(result)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "arguments",
        [{}, None, {"issue_key": ""}, {"issue_key": 123}, {"expand": "changelog"}],
    )
    async def test_invalid_arguments(self, dispatcher, mock_client, arguments):
        result = await dispatcher.call_tool("jira_get_issue", arguments)

        assert result.isError is True
        assert _text(result).startswith("Error: Invalid arguments for jira_get_issue")
        mock_client.find_issue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher, mock_client):
        result = await dispatcher.call_tool("nonexistent_tool", {"issue_key": "PROJ-1"})

        assert result.isError is True
        assert _text(result) == "Error: Unknown tool: nonexistent_tool"
        mock_client.find_issue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remote_failure_then_recovery(self, dispatcher, mock_client):
        mock_client.find_issue.side_effect = [Exception("not found"), {"id": "123"}]

        failed = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-404"})
        assert failed.isError is True
        assert _text(failed) == "Error: not found"

        ok = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-123"})
        assert ok.isError is False
        assert json.loads(_text(ok)) == {"id": "123"}

    @pytest.mark.asyncio
    async def test_jira_error_message_surfaces(self, dispatcher, mock_client):
        mock_client.find_issue.side_effect = JiraNotFoundError("Issue does not exist")
        result = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-9"})
        assert _text(result) == "Error: Issue does not exist"

    @pytest.mark.asyncio
    async def test_network_error_is_converted(self, dispatcher, mock_client):
        mock_client.find_issue.side_effect = httpx.ConnectError("connection refused")
        result = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-1"})
        assert result.isError is True
        assert _text(result) == "Error: connection refused"

    @pytest.mark.asyncio
    async def test_empty_exception_message_falls_back_to_repr(self, dispatcher, mock_client):
        mock_client.find_issue.side_effect = TimeoutError()
        result = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-1"})
        assert _text(result) == "Error: TimeoutError()"

    @pytest.mark.asyncio
    async def test_unserialisable_document_becomes_error_result(self, dispatcher, mock_client):
        mock_client.find_issue.return_value = {"id": "1", "raw": object()}
        result = await dispatcher.call_tool("jira_get_issue", {"issue_key": "PROJ-1"})
        assert result.isError is True
        assert _text(result).startswith("Error: Object of type object is not JSON serializable")

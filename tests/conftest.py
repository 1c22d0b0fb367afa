"""Shared pytest configuration and fixtures."""

import pytest

from mcp_server_jira.settings import MIN_API_TOKEN_LENGTH, JiraSettings

JIRA_URL = "https://example.atlassian.net"
JIRA_USERNAME = "bob@example.com"
JIRA_API_TOKEN = "t" * MIN_API_TOKEN_LENGTH


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if "integration" in (config.getoption("-m", default="") or ""):
        return
    skip_integration = pytest.mark.skip(reason="use -m integration to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def _clean_jira_env(monkeypatch):
    """Keep a developer's JIRA_* environment out of the settings under test."""
    for name in ("JIRA_URL", "JIRA_USERNAME", "JIRA_API_TOKEN", "JIRA_LOG_LEVEL", "JIRA_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def valid_argv():
    return [
        "--jira-url", JIRA_URL,
        "--jira-username", JIRA_USERNAME,
        "--jira-api-token", JIRA_API_TOKEN,
    ]


@pytest.fixture
def settings():
    return JiraSettings(url=JIRA_URL, username=JIRA_USERNAME, api_token=JIRA_API_TOKEN)

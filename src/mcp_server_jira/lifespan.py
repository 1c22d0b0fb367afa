"""Server lifespan: creates the JiraClient on startup, closes it on shutdown."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp_server_jira.jira.client import JiraClient
from mcp_server_jira.settings import JiraSettings

logger = logging.getLogger("mcp_server_jira")


@asynccontextmanager
async def jira_client_lifespan(settings: JiraSettings) -> AsyncIterator[JiraClient]:
    """Async context manager that owns the one JiraClient for the process."""
    config = settings.client_config()
    logger.info("Starting secure-jira-server (host=%s, user=%s)", config.host, config.username)

    client = JiraClient(config)
    try:
        yield client
    finally:
        logger.info("Shutting down secure-jira-server")
        await client.close()

"""Entry point for running the Jira MCP server: python -m mcp_server_jira"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence

from mcp_server_jira.cli import load_settings
from mcp_server_jira.logging.logger import setup_logger
from mcp_server_jira.server import serve


def main(argv: Sequence[str] | None = None) -> None:
    settings = load_settings(argv)
    logger = setup_logger(level=settings.log_level)

    try:
        asyncio.run(serve(settings))
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()

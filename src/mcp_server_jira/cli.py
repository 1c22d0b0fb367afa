"""Command line parsing and startup validation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from pydantic import ValidationError

from mcp_server_jira.settings import JiraSettings

PROG = "mcp-server-jira"
USAGE = f"{PROG} --jira-url <url> --jira-username <username> --jira-api-token <token>"

EXIT_STARTUP_ERROR = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 instead of 2 on bad input."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_STARTUP_ERROR, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage=USAGE,
        add_help=False,
        description="MCP server exposing Jira's get-issue call over stdio.",
    )
    parser.add_argument("--jira-url", help="base URL of the Jira instance")
    parser.add_argument("--jira-username", help="Jira account email")
    parser.add_argument("--jira-api-token", help="Jira API token")
    return parser


def _fail(*lines: str) -> NoReturn:
    for line in lines:
        print(line, file=sys.stderr)
    sys.exit(EXIT_STARTUP_ERROR)


def load_settings(argv: Sequence[str] | None = None) -> JiraSettings:
    """Parse and validate the startup flags, exiting with status 1 on failure."""
    args = build_parser().parse_args(argv)

    if not (args.jira_url and args.jira_username and args.jira_api_token):
        _fail("Error: Missing required arguments", f"Usage: {USAGE}")

    try:
        return JiraSettings(
            url=args.jira_url,
            username=args.jira_username,
            api_token=args.jira_api_token,
        )
    except ValidationError as e:
        _fail(*(f"Error: {_describe(err)}" for err in e.errors()))


def _describe(err: dict) -> str:
    # Validator ValueErrors carry the original exception; anything else
    # (e.g. a bad JIRA_TIMEOUT) falls back to pydantic's own wording.
    cause = err.get("ctx", {}).get("error")
    if cause is not None:
        return str(cause)
    location = ".".join(str(part) for part in err["loc"])
    return f"{location}: {err['msg']}"

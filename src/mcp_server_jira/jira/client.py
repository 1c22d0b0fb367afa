"""Async Jira REST API client using httpx."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from mcp_server_jira.jira.errors import JiraAPIError, JiraValidationError
from mcp_server_jira.settings import JiraClientConfig

logger = logging.getLogger("mcp_server_jira")


def _issue_path(issue_key: str) -> str:
    """Path for one issue, with the key escaped as a single path segment.

    A key made only of dots would still collapse as a dot segment, so it is
    refused before any request is made.
    """
    if not issue_key.strip("."):
        raise JiraValidationError(f"Invalid issue key: {issue_key!r}")
    return f"/issue/{quote(issue_key, safe='')}"


def _error_detail(response: httpx.Response) -> str:
    """Pull Jira's errorMessages/errors out of an error body, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text

    if not isinstance(body, dict):
        return response.text

    messages = list(body.get("errorMessages") or [])
    errors = body.get("errors") or {}
    if isinstance(errors, dict):
        messages.extend(f"{field}: {msg}" for field, msg in errors.items())
    return "; ".join(str(m) for m in messages) or response.text


class JiraClient:
    """Async wrapper around the Jira REST API, bound to one set of credentials."""

    def __init__(self, config: JiraClientConfig):
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            auth=(config.username, config.password),
            headers={"Accept": "application/json"},
            timeout=config.timeout,
            verify=config.strict_ssl,
        )

    @property
    def config(self) -> JiraClientConfig:
        return self._config

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug("Jira API %s %s", method, path)
        response = await self._client.request(method, path, **kwargs)
        if response.status_code >= 400:
            message = (
                f"Jira API {method} {path} failed ({response.status_code}): "
                f"{_error_detail(response)}"
            )
            raise JiraAPIError.for_status(response.status_code, message)
        if response.status_code == 204:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise JiraAPIError(
                f"Jira API {method} {path} returned a malformed response: {e}",
                status_code=response.status_code,
            ) from e

    async def _get(self, path: str, **params: Any) -> Any:
        return await self._request("GET", path, params=params)

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def find_issue(self, issue_key: str, expand: str | None = None) -> Any:
        """Fetch a single issue, optionally asking Jira to expand extra fields."""
        params: dict[str, Any] = {}
        if expand:
            params["expand"] = expand
        return await self._get(_issue_path(issue_key), **params)

"""Configuration: startup credentials and the derived Jira client config."""

from __future__ import annotations

import re

import httpx
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings

MIN_API_TOKEN_LENGTH = 32

_SCHEME_PREFIX = re.compile(r"^https?://", re.IGNORECASE)
_HTTP_SCHEMES = ("http", "https")


class JiraClientConfig(BaseModel):
    """Connection parameters for the one JiraClient the server holds."""

    model_config = {"frozen": True}

    protocol: str = "https"
    host: str
    username: str
    password: str
    api_version: str = "3"
    strict_ssl: bool = True
    timeout: float = 30

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}/rest/api/{self.api_version}"


class JiraSettings(BaseSettings):
    """Jira MCP server settings.

    The credentials (url, username, api_token) are passed in from the
    --jira-* command line flags. The remaining knobs can be tuned with
    environment variables prefixed with JIRA_ (e.g. JIRA_LOG_LEVEL).

    The credential checks are sanity filters against obviously malformed
    input; they say nothing about whether Jira will accept them.
    """

    model_config = {"env_prefix": "JIRA_", "frozen": True}

    # Required
    url: str
    username: str
    api_token: str

    # Optional
    log_level: str = "INFO"
    timeout: float = 30

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        try:
            parsed = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError("Invalid Jira URL format") from e
        if not parsed.is_absolute_url or parsed.scheme not in _HTTP_SCHEMES:
            raise ValueError("Invalid Jira URL format")
        return value

    @field_validator("username")
    @classmethod
    def _check_username(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("Username should be an email address")
        return value

    @field_validator("api_token")
    @classmethod
    def _check_api_token(cls, value: str) -> str:
        if len(value) < MIN_API_TOKEN_LENGTH:
            raise ValueError("Invalid API token format")
        return value

    def client_config(self) -> JiraClientConfig:
        """Derive the JiraClient configuration. The scheme is always https."""
        host = _SCHEME_PREFIX.sub("", self.url).rstrip("/")
        return JiraClientConfig(
            protocol="https",
            host=host,
            username=self.username,
            password=self.api_token,
            api_version="3",
            strict_ssl=True,
            timeout=self.timeout,
        )

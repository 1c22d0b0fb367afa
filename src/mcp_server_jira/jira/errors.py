"""Jira API exception hierarchy, keyed by the HTTP status Jira answered with."""

from __future__ import annotations


class JiraAPIError(Exception):
    """Any failed Jira REST call. Subclasses pin the status they stand for."""

    status: int | None = None

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code if status_code is not None else self.status
        super().__init__(message)

    @classmethod
    def for_status(cls, status_code: int, message: str) -> JiraAPIError:
        """Build the most specific error for ``status_code``."""
        error_cls = _BY_STATUS.get(status_code, JiraAPIError)
        return error_cls(message, status_code=status_code)


class JiraValidationError(JiraAPIError):
    """400: Jira rejected the request, e.g. an unknown expand value or a bad key."""

    status = 400


class JiraAuthenticationError(JiraAPIError):
    """401: the username/API token pair was not accepted."""

    status = 401


class JiraPermissionError(JiraAPIError):
    """403: the account may not browse the issue."""

    status = 403


class JiraNotFoundError(JiraAPIError):
    """404: no such issue, or it is hidden from this account."""

    status = 404


_BY_STATUS: dict[int, type[JiraAPIError]] = {
    error_cls.status: error_cls
    for error_cls in (
        JiraValidationError,
        JiraAuthenticationError,
        JiraPermissionError,
        JiraNotFoundError,
    )
}

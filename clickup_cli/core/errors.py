"""Exceptions raised by the ClickUp core."""

from __future__ import annotations

from typing import Any, Optional


class ClickUpError(Exception):
    """Base class for ClickUp CLI errors."""


class NotAuthenticatedError(ClickUpError):
    """No access token could be resolved for a command."""

    def __init__(self, message: str = 'Not authenticated. Run "clickup auth login" first.'):
        super().__init__(message)


class ClickUpAPIError(ClickUpError):
    """A non-2xx response from the ClickUp API.

    Carries the HTTP status code and the response body. Interpreting the
    status is left to the caller; `hint` only offers the usual reading.
    """

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        method: str = "",
        path: str = "",
    ):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        super().__init__(f"HTTP {status_code} on {method} {path}".rstrip())

    @property
    def detail(self) -> Optional[str]:
        """Error message reported by the API, if any."""
        if isinstance(self.body, dict):
            return self.body.get("err") or self.body.get("error")
        if isinstance(self.body, str) and self.body:
            return self.body
        return None

    @property
    def hint(self) -> Optional[str]:
        if self.status_code == 401:
            return "Authentication failed. Check your access token."
        if self.status_code == 404:
            return "Not found, or not accessible with this token."
        return None

"""API Client for the ClickUp REST API (v2)."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence
from urllib.parse import quote_plus, urlencode

import httpx

from clickup_cli.core.errors import ClickUpAPIError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.clickup.com/api/v2"

# Filter name -> query parameter name, in the order they are appended
SEARCH_FILTERS = (
    ("space_ids", "space_ids[]"),
    ("project_ids", "project_ids[]"),
    ("list_ids", "list_ids[]"),
    ("statuses", "statuses[]"),
    ("assignees", "assignees[]"),
)

Task = dict[str, Any]


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_search_query(query: str, **filters: Optional[Sequence[Any]]) -> str:
    """Build the query string for `/search/tasks`.

    `query` comes first; every filter list is expanded into repeated
    `name[]=value` pairs in input order. Spaces encode as `+` and the
    brackets are left literal.
    """
    unknown = set(filters) - {name for name, _ in SEARCH_FILTERS}
    if unknown:
        raise TypeError(f"Unknown search filter(s): {', '.join(sorted(unknown))}")

    pairs: list[tuple[str, str]] = [("query", query)]
    for name, param in SEARCH_FILTERS:
        for value in filters.get(name) or ():
            pairs.append((param, _param_value(value)))
    return urlencode(pairs, safe="[]", quote_via=quote_plus)


class ClickUpClient:
    """HTTP client for the ClickUp API.

    A client is bound to one access token and one base URL for its whole
    lifetime. Every method performs exactly one request and unwraps the
    response envelope. Non-2xx responses raise `ClickUpAPIError`; transport
    failures propagate as `httpx.TransportError`.
    """

    # Default timeout for API calls
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        access_token: str,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._headers = {
            # ClickUp expects the raw token, not "Bearer <token>"
            "Authorization": access_token,
            "Content-Type": "application/json",
        }
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                headers=self._headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "ClickUpClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path relative to the base URL, may carry a query string
            json: JSON body for the request
            params: Query parameters; entries set to None are dropped
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {k: _param_value(v) for k, v in params.items() if v is not None}

        response = self.client.request(method, url, json=json, params=params or None)
        logger.debug("%s %s -> %s", method, path, response.status_code)

        if not response.is_success:
            try:
                body: Any = response.json()
            except ValueError:
                body = response.text
            raise ClickUpAPIError(response.status_code, body, method=method, path=path)

        if not response.content:
            return None
        return response.json()

    # User & workspaces
    def get_user(self) -> dict[str, Any]:
        """Get the user the token belongs to."""
        return self._request("GET", "/user")["user"]

    def get_workspaces(self) -> list[dict[str, Any]]:
        """Get the workspaces (teams) the token can access."""
        return self._request("GET", "/team")["teams"]

    # Spaces & lists
    def get_spaces(self, team_id: str) -> list[dict[str, Any]]:
        """Get the spaces of a workspace, in server order."""
        return self._request("GET", f"/team/{team_id}/space")["spaces"]

    def get_lists(self, space_id: str, archived: Optional[bool] = None) -> list[dict[str, Any]]:
        """Get the folderless lists of a space."""
        params = {"archived": archived} if archived is not None else None
        return self._request("GET", f"/space/{space_id}/list", params=params)["lists"]

    # Tasks
    def get_tasks(
        self,
        list_id: str,
        *,
        archived: Optional[bool] = None,
        include_closed: Optional[bool] = None,
        page: Optional[int] = None,
        order_by: Optional[str] = None,
        reverse: Optional[bool] = None,
        subtasks: Optional[bool] = None,
    ) -> list[Task]:
        """Get the tasks of a list. Only filters that are set are sent."""
        params = {
            "archived": archived,
            "include_closed": include_closed,
            "page": page,
            "order_by": order_by,
            "reverse": reverse,
            "subtasks": subtasks,
        }
        return self._request("GET", f"/list/{list_id}/task", params=params)["tasks"]

    def get_task(self, task_id: str) -> Task:
        """Get a single task. The task is returned without an envelope."""
        return self._request("GET", f"/task/{task_id}")

    def create_task(self, list_id: str, payload: dict[str, Any]) -> Task:
        """Create a task in a list. `payload` must contain `name`."""
        if not payload.get("name"):
            raise ValueError("Task name is required")
        return self._request("POST", f"/list/{list_id}/task", json=payload)

    def update_task(self, task_id: str, updates: dict[str, Any]) -> Task:
        """Apply a partial update to a task. An empty update is sent as-is."""
        return self._request("PUT", f"/task/{task_id}", json=updates)

    def delete_task(self, task_id: str) -> None:
        """Delete a task."""
        self._request("DELETE", f"/task/{task_id}")

    def search_tasks(
        self,
        query: str,
        *,
        space_ids: Optional[Sequence[str]] = None,
        project_ids: Optional[Sequence[str]] = None,
        list_ids: Optional[Sequence[str]] = None,
        statuses: Optional[Sequence[str]] = None,
        assignees: Optional[Sequence[int]] = None,
    ) -> list[Task]:
        """Search tasks by text, optionally narrowed by filters."""
        query_string = build_search_query(
            query,
            space_ids=space_ids,
            project_ids=project_ids,
            list_ids=list_ids,
            statuses=statuses,
            assignees=assignees,
        )
        return self._request("GET", f"/search/tasks?{query_string}")["tasks"]

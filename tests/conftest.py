"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import httpx
import pytest

from clickup_cli.core.api_client import ClickUpClient
from clickup_cli.core.config import CLISettings
from clickup_cli.core.credentials import CredentialStore

API_PREFIX = "/api/v2"


class FakeClickUp:
    """Serves canned responses keyed by (method, path) and records every request."""

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, json: Any = None, status: int = 200) -> None:
        self.routes[(method, path)] = (status, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        if (request.method, path) not in self.routes:
            return httpx.Response(404, json={"err": "Route not found", "ECODE": "TEST_404"})
        status, body = self.routes[(request.method, path)]
        if body is None:
            return httpx.Response(status)
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def client(self, token: str = "test-token", base_url: Optional[str] = None) -> ClickUpClient:
        return ClickUpClient(token, base_url=base_url, transport=httpx.MockTransport(self.handler))

    def factory(self, token: str) -> ClickUpClient:
        return self.client(token)


@pytest.fixture
def fake_api():
    """A fake ClickUp API behind an httpx.MockTransport."""
    return FakeClickUp()


@pytest.fixture
def config_dir(tmp_path):
    """Credential directory inside the test's temporary directory."""
    return tmp_path / "clickup-config"


@pytest.fixture
def store(config_dir):
    return CredentialStore(config_dir)


@pytest.fixture
def clean_env(monkeypatch, tmp_path, config_dir):
    """Isolate the CLI from the developer's environment, .env and home directory."""
    for var in ("CLICKUP_API_TOKEN", "CLICKUP_BASE_URL", "CLICKUP_TIMEOUT", "CLICKUP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("CLICKUP_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(clean_env, config_dir):
    return CLISettings(_env_file=None, config_dir=Path(config_dir))


@pytest.fixture
def sample_task():
    return {
        "id": "86abc123",
        "name": "Write release notes",
        "description": "Summarize changes",
        "status": {"id": "s1", "status": "open", "color": "#d3d3d3"},
        "priority": {"id": "2", "priority": "high", "color": "#ffcc00"},
        "due_date": "1767225600000",
        "assignees": [{"id": 7, "username": "sam", "email": "sam@example.com"}],
        "list": {"id": "900", "name": "Backlog"},
    }


@pytest.fixture
def sample_user():
    return {"id": 7, "username": "sam", "email": "sam@example.com", "color": "#7b68ee"}

"""Credential persistence for the ClickUp CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, TypedDict

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".clickup-cli"
CONFIG_FILE_NAME = "config.json"


class Credentials(TypedDict, total=False):
    """Stored document. Keys match the on-disk JSON."""

    accessToken: str
    defaultTeamId: str
    defaultSpaceId: str


def default_config_dir() -> Path:
    return Path.home() / CONFIG_DIR_NAME


class CredentialStore:
    """JSON-file store for the access token and default ids.

    The whole document is read and written on every call. A missing file
    reads as an empty document; so does a corrupt one, with a warning,
    so that a broken file never blocks re-authentication. Write errors
    always propagate.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else default_config_dir()
        self.config_path = self.config_dir / CONFIG_FILE_NAME
        self.ensure_config_dir()

    def ensure_config_dir(self) -> None:
        """Create the config directory if needed. OSError propagates."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load(self) -> Credentials:
        if not self.config_path.exists():
            return {}

        try:
            data = json.loads(self.config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to load config %s: %s", self.config_path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: expected a JSON object", self.config_path)
            return {}
        return data

    def save(self, credentials: Credentials) -> None:
        try:
            self.config_path.write_text(json.dumps(credentials, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save config %s: %s", self.config_path, e)
            raise

    def update(self, updates: dict[str, Any]) -> Credentials:
        """Shallow-merge `updates` into the stored document.

        Keys set to None are removed from the document.
        """
        merged: dict[str, Any] = {**self.load(), **updates}
        credentials: Credentials = {k: v for k, v in merged.items() if v is not None}  # type: ignore[assignment]
        self.save(credentials)
        return credentials

    def get(self, key: str) -> Optional[str]:
        return self.load().get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        self.update({key: value})

    def clear(self) -> None:
        """Delete the stored document."""
        if self.config_path.exists():
            self.config_path.unlink()

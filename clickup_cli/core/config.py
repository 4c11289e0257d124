"""CLI Configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from clickup_cli.core.api_client import DEFAULT_BASE_URL
from clickup_cli.core.credentials import CredentialStore, default_config_dir


class CLISettings(BaseSettings):
    """Configuration for the ClickUp CLI.

    Read from CLICKUP_* environment variables and a local `.env` file.
    Explicit keyword arguments (command-line flags) take precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLICKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    api_token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    # Local state
    config_dir: Path = Field(default_factory=default_config_dir)

    log_level: str = "WARNING"

    @property
    def history_file(self) -> Path:
        return self.config_dir / "history"

    def credential_store(self) -> CredentialStore:
        return CredentialStore(self.config_dir)


def load_settings(**overrides) -> CLISettings:
    """Create settings, letting non-None overrides win over the environment."""
    return CLISettings(**{k: v for k, v in overrides.items() if v is not None})

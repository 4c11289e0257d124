"""Core CLI components - configuration, credentials and the API client."""

from clickup_cli.core.api_client import DEFAULT_BASE_URL, ClickUpClient, build_search_query
from clickup_cli.core.config import CLISettings, load_settings
from clickup_cli.core.credentials import CredentialStore, Credentials
from clickup_cli.core.errors import ClickUpAPIError, ClickUpError, NotAuthenticatedError

__all__ = [
    "DEFAULT_BASE_URL",
    "ClickUpClient",
    "build_search_query",
    "CLISettings",
    "load_settings",
    "CredentialStore",
    "Credentials",
    "ClickUpError",
    "ClickUpAPIError",
    "NotAuthenticatedError",
]

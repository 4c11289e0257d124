"""Base command classes for CLI commands."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

import httpx
from rich.markup import escape

from clickup_cli.core.api_client import ClickUpClient
from clickup_cli.core.config import CLISettings
from clickup_cli.core.credentials import CredentialStore
from clickup_cli.core.errors import ClickUpAPIError, NotAuthenticatedError
from clickup_cli.ui.console import console, print_error

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], ClickUpClient]
Handler = Callable[[list[str], dict[str, Any]], bool]


def require_numeric(value: str, label: str) -> str:
    """Validate an identifier that ClickUp expects to be numeric."""
    if not str(value).isdigit():
        raise ValueError(f"Invalid {label}: {value!r} (expected a number)")
    return str(value)


def as_list(value: Any) -> list[str]:
    """Normalize a flag that may be given once, several times, or not at all."""
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    aliases: list[str] = []

    # Flags that never take a value
    boolean_flags: set[str] = {"json", "j", "force", "f", "archived", "a", "closed", "c", "all"}

    def __init__(
        self,
        settings: CLISettings,
        token: Optional[str] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.settings = settings
        self.token = token
        self._client_factory = client_factory or self._default_client
        self._store: Optional[CredentialStore] = None

    @property
    def store(self) -> CredentialStore:
        """Lazy-open the credential store (creates the config directory)."""
        if self._store is None:
            self._store = self.settings.credential_store()
        return self._store

    def _default_client(self, access_token: str) -> ClickUpClient:
        return ClickUpClient(
            access_token,
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
        )

    def resolve_token(self) -> Optional[str]:
        """Explicit --token, then CLICKUP_API_TOKEN, then the stored token."""
        return self.token or self.settings.api_token or self.store.get("accessToken")

    def make_client(self, access_token: Optional[str] = None) -> ClickUpClient:
        token = access_token or self.resolve_token()
        if not token:
            raise NotAuthenticatedError()
        return self._client_factory(token)

    @abstractmethod
    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.

        Args:
            args: Command arguments

        Returns:
            True if successful, False otherwise
        """
        pass

    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments.

        A flag given more than once collects its values into a list. A flag
        outside `boolean_flags` must be followed by a value.
        """
        flags: dict[str, Any] = {}
        remaining = []

        def put(key: str, value: Any) -> None:
            if key in flags and value is not True:
                previous = flags[key]
                flags[key] = (previous if isinstance(previous, list) else [previous]) + [value]
            else:
                flags[key] = value

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("-") and "=" in arg:
                key, value = arg.lstrip("-").split("=", 1)
                put(key, value)
            elif arg.startswith("--") or (arg.startswith("-") and len(arg) == 2):
                key = arg.lstrip("-")
                if key in self.boolean_flags:
                    put(key, True)
                elif i + 1 < len(args) and not args[i + 1].startswith("-"):
                    put(key, args[i + 1])
                    i += 1
                else:
                    raise ValueError(
                        f"Option {arg} needs a value "
                        f"(write {arg}=VALUE for a value starting with '-')"
                    )
            else:
                remaining.append(arg)
            i += 1

        return flags, remaining

    def run_handler(self, handler: Handler, args: list[str], flags: dict[str, Any]) -> bool:
        """Run a handler, turning failures into error panels."""
        try:
            return handler(args, flags)
        except NotAuthenticatedError as e:
            print_error(str(e), title="Not authenticated")
        except ClickUpAPIError as e:
            self._print_api_error(e)
        except httpx.HTTPError as e:
            print_error(f"{type(e).__name__}: {e}", title="Request failed")
        except ValueError as e:
            print_error(str(e), title="Invalid argument")
        return False

    def _print_api_error(self, error: ClickUpAPIError) -> None:
        logger.debug("API error body: %r", error.body)
        message = str(error)
        if error.detail:
            message += f"\n{error.detail}"
        print_error(message, title=f"ClickUp API error {error.status_code}")
        if error.hint:
            console.print(f"  [muted]{error.hint}[/muted]")


class GroupCommand(BaseCommand):
    """A command with subcommands, e.g. `task get`.

    Subclasses map subcommand names (and aliases) to handler method names.
    """

    subcommands: dict[str, str] = {}

    def execute(self, args: list[str]) -> bool:
        try:
            flags, remaining = self.parse_flags(args)
        except ValueError as e:
            print_error(str(e), title="Invalid argument")
            return False

        if not remaining:
            self.show_usage()
            return False

        subcommand = remaining[0].lower()
        method_name = self.subcommands.get(subcommand)
        if method_name is None:
            print_error(f"Unknown subcommand: {self.name} {subcommand}")
            self.show_usage()
            return False

        return self.run_handler(getattr(self, method_name), remaining[1:], flags)

    def show_usage(self) -> None:
        console.print(f"[muted]Usage:[/muted] [command]{escape(self.usage)}[/command]")

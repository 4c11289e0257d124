"""Auth command - login, logout and token status."""

from __future__ import annotations

from typing import Any

from rich.prompt import Prompt

from clickup_cli.commands.base import GroupCommand
from clickup_cli.core.errors import ClickUpAPIError
from clickup_cli.ui.console import console, print_error, print_success, print_warning
from clickup_cli.ui.spinners import create_spinner


class AuthCommand(GroupCommand):
    """Manage the stored access token."""

    name = "auth"
    description = "Log in, log out and show authentication status"
    usage = "auth <login|logout|status> [--token TOKEN] [--all]"
    aliases = []

    subcommands = {
        "login": "login",
        "logout": "logout",
        "status": "status",
        "whoami": "status",
    }

    def login(self, args: list[str], flags: dict[str, Any]) -> bool:
        """Verify a token against the API and store it."""
        token = self.token or flags.get("token")
        if not token:
            token = Prompt.ask(
                "[primary]❯[/primary] [text]Enter your ClickUp access token[/text]",
                console=console,
                password=True,
            ).strip()
        if not token:
            print_warning("No token entered")
            return False

        with create_spinner("Verifying token..."):
            with self.make_client(token) as client:
                try:
                    user = client.get_user()
                except ClickUpAPIError as e:
                    if e.status_code == 401:
                        print_error("Failed to authenticate. Please check your access token.")
                        return False
                    raise

        self.store.set("accessToken", token)
        print_success(f"Logged in as {user.get('username', '?')}")
        return True

    def logout(self, args: list[str], flags: dict[str, Any]) -> bool:
        """Forget the stored token; `--all` also drops stored defaults."""
        if flags.get("all"):
            self.store.clear()
        else:
            self.store.update({"accessToken": None})
        print_success("Logged out")
        return True

    def status(self, args: list[str], flags: dict[str, Any]) -> bool:
        token = self.resolve_token()
        if not token:
            print_warning('Not authenticated. Run "clickup auth login" to log in.')
            return True

        with create_spinner("Checking token..."):
            with self.make_client(token) as client:
                try:
                    user = client.get_user()
                except ClickUpAPIError as e:
                    if e.status_code == 401:
                        print_error("Authentication expired or invalid. Please log in again.")
                        return False
                    raise

        print_success(f"Authenticated as {user.get('username', '?')} ({user.get('email', '?')})")

        defaults = self.store.load()
        if defaults.get("defaultTeamId"):
            console.print(f"  [muted]Default workspace:[/muted] [id]{defaults['defaultTeamId']}[/id]")
        if defaults.get("defaultSpaceId"):
            console.print(f"  [muted]Default space:[/muted] [id]{defaults['defaultSpaceId']}[/id]")
        return True

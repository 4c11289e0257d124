"""User command - show the authenticated user."""

from __future__ import annotations

from typing import Any

from clickup_cli.commands.base import GroupCommand
from clickup_cli.ui.console import console, print_json
from clickup_cli.ui.panels import create_user_panel
from clickup_cli.ui.spinners import create_spinner


class UserCommand(GroupCommand):
    name = "user"
    description = "Show the user the access token belongs to"
    usage = "user me [--json]"
    aliases = ["me"]

    subcommands = {
        "me": "me",
    }

    def execute(self, args: list[str]) -> bool:
        # `clickup me` and `clickup user` both mean `user me`
        if not [a for a in args if not a.startswith("-")]:
            args = ["me", *args]
        return super().execute(args)

    def me(self, args: list[str], flags: dict[str, Any]) -> bool:
        with create_spinner("Fetching user...", style="loading"):
            with self.make_client() as client:
                user = client.get_user()

        if flags.get("json") or flags.get("j"):
            print_json(user)
        else:
            console.print()
            console.print(create_user_panel(user))
        return True
